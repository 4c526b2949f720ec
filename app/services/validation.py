"""Field rules for property create/update requests.

Rules run explicitly in PropertyService before anything reaches the store.
All violations are collected so the client sees every problem at once.
"""
import math
import re
from typing import Optional

from app.core.exceptions import PropertyValidationError
from app.schemas.property import PropertyRequest

ADDRESS_MIN_LENGTH = 5
ADDRESS_MAX_LENGTH = 500
MIN_PRICE = 0.01
MIN_SIZE = 1.0
DESCRIPTION_MAX_LENGTH = 1000
OWNER_NAME_MIN_LENGTH = 2
OWNER_NAME_MAX_LENGTH = 200
OWNER_PHONE_MAX_LENGTH = 20
OWNER_EMAIL_MAX_LENGTH = 100
OWNER_DOCUMENT_MAX_LENGTH = 50

PHONE_PATTERN = re.compile(r"^[+]?[0-9\s\-()]*$")
DOCUMENT_PATTERN = re.compile(r"^[A-Za-z0-9\-.\s]*$")
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)+$"
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_number(value: Optional[float], label: str, minimum: float, message: str) -> list[str]:
    if value is None:
        return [f"{label} is required"]
    if not math.isfinite(value) or value < minimum:
        return [message]
    return []


def _check_max_length(value: Optional[str], label: str, max_length: int) -> list[str]:
    if value is not None and len(value) > max_length:
        return [f"{label} must not exceed {max_length} characters"]
    return []


def collect_errors(data: PropertyRequest) -> list[str]:
    errors: list[str] = []

    if _is_blank(data.address):
        errors.append("address is required")
    elif not (ADDRESS_MIN_LENGTH <= len(data.address) <= ADDRESS_MAX_LENGTH):
        errors.append(f"address must be between {ADDRESS_MIN_LENGTH} and {ADDRESS_MAX_LENGTH} characters")

    errors += _check_number(data.price, "price", MIN_PRICE, "price must be greater than zero")
    errors += _check_number(data.size, "size", MIN_SIZE, f"size must be at least {MIN_SIZE:g} m²")
    errors += _check_max_length(data.description, "description", DESCRIPTION_MAX_LENGTH)

    # ownerName is optional; when sent it has to be a real name
    if data.owner_name is not None:
        if _is_blank(data.owner_name):
            errors.append("ownerName must not be blank")
        elif not (OWNER_NAME_MIN_LENGTH <= len(data.owner_name) <= OWNER_NAME_MAX_LENGTH):
            errors.append(
                f"ownerName must be between {OWNER_NAME_MIN_LENGTH} and {OWNER_NAME_MAX_LENGTH} characters"
            )

    if data.owner_phone is not None:
        errors += _check_max_length(data.owner_phone, "ownerPhone", OWNER_PHONE_MAX_LENGTH)
        if not PHONE_PATTERN.fullmatch(data.owner_phone):
            errors.append("ownerPhone may only contain digits, spaces, dashes, parentheses and a leading +")

    if data.owner_email is not None:
        errors += _check_max_length(data.owner_email, "ownerEmail", OWNER_EMAIL_MAX_LENGTH)
        # empty string means "no email"
        if data.owner_email and not EMAIL_PATTERN.fullmatch(data.owner_email):
            errors.append("ownerEmail must be a valid email address")

    if data.owner_document is not None:
        errors += _check_max_length(data.owner_document, "ownerDocument", OWNER_DOCUMENT_MAX_LENGTH)
        if not DOCUMENT_PATTERN.fullmatch(data.owner_document):
            errors.append("ownerDocument may only contain letters, digits, dashes, dots and spaces")

    return errors


def validate_property(data: PropertyRequest) -> PropertyRequest:
    """Raise PropertyValidationError listing every broken rule, else return data unchanged."""
    errors = collect_errors(data)
    if errors:
        raise PropertyValidationError(errors)
    return data
