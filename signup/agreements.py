from typing import Literal

from pydantic import BaseModel, ConfigDict

AgreementName = Literal["terms", "privacy", "marketing", "all"]


class Agreements(BaseModel):
    model_config = ConfigDict(frozen=True)

    all: bool = False
    terms: bool = False
    privacy: bool = False
    marketing: bool = False


def derive_all(a: Agreements) -> Agreements:
    return a.model_copy(update={"all": a.terms and a.privacy and a.marketing})


def fan_out_all(a: Agreements, value: bool) -> Agreements:
    return a.model_copy(
        update={"all": value, "terms": value, "privacy": value, "marketing": value}
    )


def toggle(a: Agreements, which: AgreementName, value: bool) -> Agreements:
    """
    Apply a single checkbox write. "all" fans out to the three sub-flags;
    any sub-flag write re-derives "all".
    """
    if which == "all":
        return fan_out_all(a, value)
    if which not in ("terms", "privacy", "marketing"):
        raise ValueError(f"Unknown agreement: {which!r}")
    return derive_all(a.model_copy(update={which: value}))
