"""Student Routes tests - HTTP surface over FastAPI + in-memory SQLite.

Tests cover:
    - POST 201 / GET 200 / PUT 200 / DELETE 204 with the {data, message, status} envelope
    - Accept-Language selects the message and Content-Language; data and status unchanged
    - Not-found, duplicate email and validation failures map to localized error bodies
    - 204 responses carry no body
    - Path ids outside the 64-bit range are 400s
"""

import pytest

from student_api.core.domain_types import Locale
from student_api.core.message_catalog import get_message

BASE = "/api/v1/students"

GRACE = {"first_name": "Grace", "last_name": "Hopper", "email": "Grace@Example.com"}


async def test_create_returns_201_envelope(client):
    res = await client.post(BASE, json=GRACE)

    assert res.status_code == 201
    body = res.json()
    assert body["status"] == 201
    assert body["message"] == "Student created successfully"
    assert body["data"]["id"] >= 1
    assert body["data"]["email"] == "grace@example.com"
    assert res.headers["content-language"] == "en"


async def test_created_id_is_retrievable(client):
    created = (await client.post(BASE, json=GRACE)).json()["data"]

    res = await client.get(f"{BASE}/{created['id']}")

    assert res.status_code == 200
    assert res.json()["data"]["id"] == created["id"]
    assert res.json()["message"] == "Student retrieved successfully"


async def test_list_returns_all_students(client, seed_student):
    await client.post(BASE, json=GRACE)

    res = await client.get(BASE)

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == 200
    assert len(body["data"]) == 2
    assert body["message"] == "Students retrieved successfully"


async def test_list_empty(client):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert res.json()["data"] == []


async def test_get_seeded_student(client, seed_student):
    res = await client.get(f"{BASE}/{seed_student.id}")

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["first_name"] == "Ada"
    assert data["email"] == "ada@example.com"


async def test_get_unknown_id_defaults_to_english_message(client):
    res = await client.get(f"{BASE}/999")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Student not found"
    assert error["context"]["student_id"] == 999
    assert error["context"]["locale"] == "en"


@pytest.mark.parametrize("locale", list(Locale))
async def test_get_unknown_id_message_is_localized(client, locale):
    res = await client.get(
        f"{BASE}/999", headers={"Accept-Language": locale.value},
    )

    assert res.status_code == 404
    assert res.json()["error"]["message"] == get_message("student.not.found", locale)
    assert res.headers["content-language"] == locale.value


async def test_accept_language_changes_only_message(client, seed_student):
    english = await client.get(f"{BASE}/{seed_student.id}")
    french = await client.get(
        f"{BASE}/{seed_student.id}", headers={"Accept-Language": "fr-FR,fr;q=0.9"},
    )

    assert english.status_code == french.status_code == 200
    assert english.json()["data"] == french.json()["data"]
    assert english.json()["status"] == french.json()["status"]
    assert french.json()["message"] == "Étudiant récupéré avec succès"
    assert english.json()["message"] != french.json()["message"]


async def test_unsupported_language_falls_back_to_english(client, seed_student):
    res = await client.get(
        f"{BASE}/{seed_student.id}", headers={"Accept-Language": "ja"},
    )

    assert res.json()["message"] == "Student retrieved successfully"
    assert res.headers["content-language"] == "en"


async def test_update_returns_200(client, seed_student):
    res = await client.put(
        f"{BASE}/{seed_student.id}",
        json={"first_name": "Augusta Ada", "last_name": "King", "email": "ada@example.com"},
        headers={"Accept-Language": "es"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["data"]["first_name"] == "Augusta Ada"
    assert body["data"]["id"] == seed_student.id
    assert body["message"] == "Estudiante actualizado correctamente"


async def test_update_unknown_id_returns_localized_404(client):
    res = await client.put(
        f"{BASE}/404", json=GRACE, headers={"Accept-Language": "de"},
    )

    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Student nicht gefunden"


@pytest.mark.parametrize("language", ["en", "pt-BR", "fr"])
async def test_delete_returns_204_without_body(client, seed_student, language):
    res = await client.delete(
        f"{BASE}/{seed_student.id}", headers={"Accept-Language": language},
    )

    assert res.status_code == 204
    assert res.content == b""

    missing = await client.get(f"{BASE}/{seed_student.id}")
    assert missing.status_code == 404


async def test_delete_unknown_id_returns_404(client):
    res = await client.delete(f"{BASE}/31337")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_duplicate_email_returns_409(client, seed_student):
    res = await client.post(
        BASE,
        json={"first_name": "Other", "last_name": "Ada", "email": "ADA@example.com"},
        headers={"Accept-Language": "pt-BR"},
    )

    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "EMAIL_ALREADY_EXISTS"
    assert error["message"] == "Já existe um aluno com este e-mail"


async def test_invalid_body_returns_localized_400(client):
    res = await client.post(
        BASE,
        json={"first_name": "  ", "last_name": "Hopper", "email": "not-an-email"},
        headers={"Accept-Language": "fr"},
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Données de requête invalides"
    fields = {d["field"] for d in error["details"]}
    assert "body.first_name" in fields
    assert "body.email" in fields


async def test_unknown_field_rejected(client):
    res = await client.post(BASE, json={**GRACE, "grade": "A"})
    assert res.status_code == 400


async def test_non_integer_id_returns_400(client):
    res = await client.get(f"{BASE}/abc")

    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "path.student_id"


@pytest.mark.parametrize("student_id", ["0", "-1", str(2**63), str(2**64)])
async def test_out_of_range_id_returns_400(client, student_id):
    for res in (
        await client.get(f"{BASE}/{student_id}"),
        await client.put(f"{BASE}/{student_id}", json=GRACE),
        await client.delete(f"{BASE}/{student_id}"),
    ):
        assert res.status_code == 400
        assert res.json()["error"]["details"][0]["field"] == "path.student_id"


async def test_largest_id_is_a_plain_404(client):
    res = await client.get(f"{BASE}/{2**63 - 1}")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
