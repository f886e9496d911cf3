import re
from enum import Enum
from typing import Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)

PHONE_RE = re.compile(r"^0[0-9]{1,2}[- ]?[0-9]{3,4}[- ]?[0-9]{4}$")
USERNAME_RE = re.compile(r"^[A-Za-z0-9]{3,15}$")
PASSWORD_MIN_LENGTH = 8


class ErrorKind(str, Enum):
    REQUIRED = "required"
    FORMAT = "format"
    NOT_FOUND = "not_found"
    # Uniqueness against the directory is left to the persisting collaborator.
    DUPLICATED = "duplicated"


def validate_email(value: str) -> bool:
    if not value:
        return False
    try:
        address = _email_adapter.validate_python(value)
    except ValidationError:
        return False
    # "Name <addr>" parses too; only a bare address is accepted.
    return address.lower() == value.lower()


def validate_phone(value: str) -> bool:
    """Checked on the raw input, before normalize_phone strips separators."""
    return bool(value) and PHONE_RE.fullmatch(value) is not None


def validate_password(value: str) -> bool:
    if len(value) < PASSWORD_MIN_LENGTH:
        return False
    has_letter = any(c.isascii() and c.isalpha() for c in value)
    has_digit = any(c.isascii() and c.isdigit() for c in value)
    has_special = any(not c.isalnum() and not c.isspace() for c in value)
    return has_letter and has_digit and has_special


def validate_username(value: str) -> bool:
    return bool(value) and USERNAME_RE.fullmatch(value) is not None


def normalize_phone(value: str) -> str:
    return re.sub(r"[^0-9]", "", value)


def classify(
    value: str,
    valid: bool,
    required: bool,
    on_failure: ErrorKind = ErrorKind.FORMAT,
) -> Optional[ErrorKind]:
    """
    Error category for a single field, used to pick a message.

    An empty value is REQUIRED when the field is mandatory and no error at all
    when it is optional. A present value that failed uses ``on_failure``.
    """
    if valid:
        return None
    if value == "":
        return ErrorKind.REQUIRED if required else None
    return on_failure


def validate_confirm_password(password: str, confirm_password: str) -> bool:
    return bool(password) and bool(confirm_password) and password == confirm_password


def validate_referral_username(value: str, directory) -> bool:
    """Referral is optional: empty is valid, otherwise it must resolve."""
    if value == "":
        return True
    return directory.resolve(value) is not None
