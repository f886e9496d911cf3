import logging
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from signup.directory import UserDirectory
from signup.errors import SubmissionRejected
from signup.fields import FIELDS, FieldSpec
from signup.rules import normalize_phone
from signup.state import FormData, SignupState, User, Validations

logger = logging.getLogger(__name__)


class RegistrationValidator:
    def __init__(self, directory: UserDirectory):
        self.directory = directory

    def check_field(self, spec: FieldSpec, form: FormData) -> bool:
        return bool(spec.check(form, self.directory))

    def compute_validations(self, form: FormData) -> Validations:
        """Recompute every entry from the current form and directory."""
        validations = Validations(
            **{spec.attr: self.check_field(spec, form) for spec in FIELDS}
        )
        logger.debug("validations: %s", validations.model_dump(by_alias=True))
        return validations

    def validate_node(self, state: SignupState) -> Dict[str, Any]:
        validations = self.compute_validations(state.form)
        # Aggregate comes from this pass, never from the previous state.
        return {"validations": validations, "aggregate": validations.all_valid()}

    @staticmethod
    def should_complete(state: SignupState) -> Literal["end", "complete"]:
        return "complete" if state.aggregate else "end"

    def referral_user_id(self, form: FormData) -> Optional[int]:
        if form.referral_username == "":
            return None
        return self.directory.resolve(form.referral_username)

    def build_user(self, form: FormData, created_at: datetime) -> User:
        validations = self.compute_validations(form)
        if not validations.all_valid():
            raise SubmissionRejected(validations.failing())

        return User(
            id=len(self.directory) + 1,
            email=form.email,
            phone=normalize_phone(form.phone),
            username=form.username,
            referral_user_id=self.referral_user_id(form),
            is_terms_agree=form.is_terms_agree,
            is_privacy_agree=form.is_privacy_agree,
            is_marketing_agree=form.is_marketing_agree,
            created_at=created_at,
        )
