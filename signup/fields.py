from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from signup.directory import UserDirectory
from signup.rules import (
    ErrorKind,
    validate_confirm_password,
    validate_email,
    validate_password,
    validate_phone,
    validate_referral_username,
    validate_username,
)
from signup.state import FormData

Check = Callable[[FormData, UserDirectory], bool]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    attr: str
    check: Check
    required: bool = True
    depends_on: Tuple[str, ...] = ()
    on_failure: ErrorKind = ErrorKind.FORMAT


FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("email", "email", lambda f, d: validate_email(f.email)),
    FieldSpec("password", "password", lambda f, d: validate_password(f.password)),
    FieldSpec(
        "confirmPassword",
        "confirm_password",
        lambda f, d: validate_confirm_password(f.password, f.confirm_password),
        depends_on=("password",),
    ),
    FieldSpec("phone", "phone", lambda f, d: validate_phone(f.phone)),
    FieldSpec("username", "username", lambda f, d: validate_username(f.username)),
    FieldSpec(
        "referralUsername",
        "referral_username",
        lambda f, d: validate_referral_username(f.referral_username, d),
        required=False,
        on_failure=ErrorKind.NOT_FOUND,
    ),
    FieldSpec("isTermsAgree", "is_terms_agree", lambda f, d: f.is_terms_agree),
    FieldSpec("isPrivacyAgree", "is_privacy_agree", lambda f, d: f.is_privacy_agree),
)

BY_NAME: Dict[str, FieldSpec] = {}
for _spec in FIELDS:
    BY_NAME[_spec.name] = _spec
    BY_NAME[_spec.attr] = _spec


def get_field(name: str) -> FieldSpec:
    """Look up a validated field by wire or attribute name."""
    try:
        return BY_NAME[name]
    except KeyError:
        raise KeyError(f"Not a validated field: {name!r}") from None


def dependents_of(name: str) -> Tuple[FieldSpec, ...]:
    """Fields to re-validate when ``name`` changes, the field itself first."""
    out = []
    own = BY_NAME.get(name)
    if own is not None:
        out.append(own)
        name = own.name
    out.extend(spec for spec in FIELDS if name in spec.depends_on)
    return tuple(out)
