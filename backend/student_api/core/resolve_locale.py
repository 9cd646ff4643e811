"""Locale Resolution - deterministic Accept-Language header to Locale mapping.

Invariants:
    - Always returns a valid Locale (never None, never raises)
    - Missing, empty, or wildcard-only header returns the default locale
    - Higher q-weight wins; equal weights keep header order
    - Exact tag match beats primary-subtag match within the same range

Design Decisions:
    - Hand-parsed ranges over a negotiation library: five locales, one header
    - Malformed q values count as q=0 (dropped) instead of failing the request
"""

from student_api.core.domain_types import DEFAULT_LOCALE, Locale

_BY_TAG: dict[str, Locale] = {locale.value.lower(): locale for locale in Locale}

# Primary subtag -> locale served for any regional variant of it
_BY_PRIMARY: dict[str, Locale] = {
    "en": Locale.EN,
    "fr": Locale.FR,
    "es": Locale.ES,
    "pt": Locale.PT_BR,
    "de": Locale.DE,
}


def resolve_locale(
    header: str | None, default: Locale = DEFAULT_LOCALE,
) -> Locale:
    """Pick the best supported Locale for an Accept-Language header value."""
    if not header:
        return default

    for tag in _ranked_tags(header):
        locale = _match(tag)
        if locale is not None:
            return locale
    return default


def _ranked_tags(header: str) -> list[str]:
    """Language ranges sorted by descending q, header order preserved on ties."""
    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower().replace("_", "-")
        if not tag or tag == "*":
            continue
        q = _parse_weight(params)
        if q <= 0.0:
            continue
        weighted.append((-q, position, tag))
    weighted.sort()
    return [tag for _, _, tag in weighted]


def _parse_weight(params: str) -> float:
    for param in params.split(";"):
        name, _, value = param.strip().partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value.strip())
            except ValueError:
                return 0.0
    return 1.0


def _match(tag: str) -> Locale | None:
    exact = _BY_TAG.get(tag)
    if exact is not None:
        return exact
    return _BY_PRIMARY.get(tag.split("-", 1)[0])
