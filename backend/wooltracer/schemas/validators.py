"""Reusable field validators for intake schemas.

- Email validation
- Photo URL validation
- Certification list parsing
"""

import re

# Regex patterns
EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
URL_REGEX = re.compile(
    r"^https?://"  # http:// or https://
    r"(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,6}\.?|"  # domain
    r"localhost|"  # localhost
    r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"  # IP
    r"(?::\d+)?"  # optional port
    r"(?:/?|[/?]\S+)$",
    re.IGNORECASE,
)


def validate_email(value: str) -> str:
    """Validate a contact email address.

    Args:
        value: Email address

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email is invalid
    """
    if not value:
        raise ValueError("Email is required")

    value = value.strip().lower()

    if len(value) > 254:  # RFC 5321
        raise ValueError("Email address too long")

    if not EMAIL_REGEX.match(value):
        raise ValueError("Must be a valid email address")

    return value


def validate_url(value: str) -> str:
    """Validate a photo URL.

    Args:
        value: URL

    Returns:
        Validated URL

    Raises:
        ValueError: If URL is invalid
    """
    if not value:
        raise ValueError("URL is required")

    value = value.strip()

    if not URL_REGEX.match(value):
        raise ValueError("Must be a valid URL")

    return value


def parse_certifications(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated certification string into a clean list.

    Entries are trimmed and empties dropped; order is kept. A list is
    cleaned the same way, so both form input and JSON arrays are accepted.
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        raise ValueError("Certifications must be a comma-separated string or a list")

    certifications = []
    for part in parts:
        if not isinstance(part, str):
            raise ValueError("Each certification must be a string")
        cert = part.strip()
        if cert:
            certifications.append(cert)
    return certifications
