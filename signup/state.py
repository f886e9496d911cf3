from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FormData(BaseModel):
    """Mutable draft of a registration, owned by a single form session."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True
    )

    email: str = Field(default="", description="User email")
    phone: str = Field(default="", description="Phone number, formatting allowed")
    password: str = Field(default="", description="Raw password")
    confirm_password: str = Field(default="", description="Password confirmation")
    username: str = Field(default="", description="Alphanumeric, 3-15 characters")
    referral_username: str = Field(default="", description="Optional referrer username")

    is_all_agree: bool = False
    is_terms_agree: bool = False
    is_privacy_agree: bool = False
    is_marketing_agree: bool = False


class Validations(BaseModel):
    """
    Derived cache of per-field validity. Only ever replaced wholesale by a
    recomputation over the current FormData and directory.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: bool = False
    password: bool = False
    confirm_password: bool = False
    phone: bool = False
    username: bool = False
    referral_username: bool = False
    is_terms_agree: bool = False
    is_privacy_agree: bool = False

    def all_valid(self) -> bool:
        return all(getattr(self, name) for name in type(self).model_fields)

    def failing(self) -> List[str]:
        """Wire names of every field currently invalid, in field order."""
        return [
            to_camel(name)
            for name in type(self).model_fields
            if not getattr(self, name)
        ]


class User(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    email: str = ""
    phone: str = Field(default="", description="Digits only")
    username: str
    referral_user_id: Optional[int] = None
    is_terms_agree: bool = False
    is_privacy_agree: bool = False
    is_marketing_agree: bool = False
    created_at: Optional[datetime] = None


class SignupState(BaseModel):
    form: FormData = Field(default_factory=FormData)
    validations: Validations = Field(default_factory=Validations)
    aggregate: bool = False
    user: Optional[User] = None
