"""Message Catalog - centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO)
    - Every MessageKey is defined for every Locale
    - Lookups for a missing locale entry fall back to DEFAULT_LOCALE
    - A key unknown to the default catalog raises MessageNotFoundError

Design Decisions:
    - In-code dicts over resource bundles: ten keys, five locales, reviewed in one diff
    - CatalogMessageSource wraps the dicts so handlers depend on the MessageSource
      Protocol and tests can swap in a fake
"""

from student_api.core.domain_types import DEFAULT_LOCALE, Locale, MessageKey
from student_api.core.errors import MessageNotFoundError


_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        MessageKey.STUDENT_CREATED: "Student created successfully",
        MessageKey.STUDENTS_RETRIEVED: "Students retrieved successfully",
        MessageKey.STUDENT_RETRIEVED: "Student retrieved successfully",
        MessageKey.STUDENT_NOT_FOUND: "Student not found",
        MessageKey.STUDENT_UPDATED: "Student updated successfully",
        MessageKey.STUDENT_DELETED: "Student deleted successfully",
        MessageKey.STUDENT_EMAIL_EXISTS: "A student with this email already exists",
        MessageKey.VALIDATION_FAILED: "Invalid request data",
        MessageKey.DATABASE_UNAVAILABLE: "The student store is temporarily unavailable",
        MessageKey.INTERNAL_ERROR: "An unexpected error occurred",
    },
    Locale.FR: {
        MessageKey.STUDENT_CREATED: "Étudiant créé avec succès",
        MessageKey.STUDENTS_RETRIEVED: "Étudiants récupérés avec succès",
        MessageKey.STUDENT_RETRIEVED: "Étudiant récupéré avec succès",
        MessageKey.STUDENT_NOT_FOUND: "Étudiant introuvable",
        MessageKey.STUDENT_UPDATED: "Étudiant mis à jour avec succès",
        MessageKey.STUDENT_DELETED: "Étudiant supprimé avec succès",
        MessageKey.STUDENT_EMAIL_EXISTS: "Un étudiant avec cet e-mail existe déjà",
        MessageKey.VALIDATION_FAILED: "Données de requête invalides",
        MessageKey.DATABASE_UNAVAILABLE: "Le registre des étudiants est temporairement indisponible",
        MessageKey.INTERNAL_ERROR: "Une erreur inattendue s'est produite",
    },
    Locale.ES: {
        MessageKey.STUDENT_CREATED: "Estudiante creado correctamente",
        MessageKey.STUDENTS_RETRIEVED: "Estudiantes obtenidos correctamente",
        MessageKey.STUDENT_RETRIEVED: "Estudiante obtenido correctamente",
        MessageKey.STUDENT_NOT_FOUND: "Estudiante no encontrado",
        MessageKey.STUDENT_UPDATED: "Estudiante actualizado correctamente",
        MessageKey.STUDENT_DELETED: "Estudiante eliminado correctamente",
        MessageKey.STUDENT_EMAIL_EXISTS: "Ya existe un estudiante con este correo",
        MessageKey.VALIDATION_FAILED: "Datos de solicitud no válidos",
        MessageKey.DATABASE_UNAVAILABLE: "El registro de estudiantes no está disponible temporalmente",
        MessageKey.INTERNAL_ERROR: "Ocurrió un error inesperado",
    },
    Locale.PT_BR: {
        MessageKey.STUDENT_CREATED: "Aluno criado com sucesso",
        MessageKey.STUDENTS_RETRIEVED: "Alunos recuperados com sucesso",
        MessageKey.STUDENT_RETRIEVED: "Aluno recuperado com sucesso",
        MessageKey.STUDENT_NOT_FOUND: "Aluno não encontrado",
        MessageKey.STUDENT_UPDATED: "Aluno atualizado com sucesso",
        MessageKey.STUDENT_DELETED: "Aluno excluído com sucesso",
        MessageKey.STUDENT_EMAIL_EXISTS: "Já existe um aluno com este e-mail",
        MessageKey.VALIDATION_FAILED: "Dados da requisição inválidos",
        MessageKey.DATABASE_UNAVAILABLE: "O cadastro de alunos está temporariamente indisponível",
        MessageKey.INTERNAL_ERROR: "Ocorreu um erro inesperado",
    },
    Locale.DE: {
        MessageKey.STUDENT_CREATED: "Student erfolgreich angelegt",
        MessageKey.STUDENTS_RETRIEVED: "Studenten erfolgreich abgerufen",
        MessageKey.STUDENT_RETRIEVED: "Student erfolgreich abgerufen",
        MessageKey.STUDENT_NOT_FOUND: "Student nicht gefunden",
        MessageKey.STUDENT_UPDATED: "Student erfolgreich aktualisiert",
        MessageKey.STUDENT_DELETED: "Student erfolgreich gelöscht",
        MessageKey.STUDENT_EMAIL_EXISTS: "Ein Student mit dieser E-Mail existiert bereits",
        MessageKey.VALIDATION_FAILED: "Ungültige Anfragedaten",
        MessageKey.DATABASE_UNAVAILABLE: "Das Studentenverzeichnis ist vorübergehend nicht verfügbar",
        MessageKey.INTERNAL_ERROR: "Ein unerwarteter Fehler ist aufgetreten",
    },
}


def get_message(key: str, locale: Locale = DEFAULT_LOCALE) -> str:
    """Resolve a message key for a locale, falling back to the default catalog."""
    message = _MESSAGES.get(locale, {}).get(key)
    if message is not None:
        return message
    fallback = _MESSAGES[DEFAULT_LOCALE].get(key)
    if fallback is None:
        raise MessageNotFoundError(key)
    return fallback


class CatalogMessageSource:
    """MessageSource backed by the in-code catalog."""

    def get_message(self, key: str, locale: Locale) -> str:
        return get_message(key, locale)
