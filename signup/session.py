import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel

from signup.agreements import AgreementName, Agreements, toggle
from signup.directory import UserDirectory
from signup.fields import dependents_of, get_field
from signup.graph import Clock, SignupGraphFactory
from signup.rules import ErrorKind, classify
from signup.state import FormData, User, Validations
from signup.validator import RegistrationValidator

logger = logging.getLogger(__name__)

_flag_adapter = TypeAdapter(bool)

_ATTRS: Dict[str, str] = {}
for _attr in FormData.model_fields:
    _ATTRS[_attr] = _attr
    _ATTRS[to_camel(_attr)] = _attr

_AGREEMENT_FLAGS: Dict[str, AgreementName] = {
    "is_all_agree": "all",
    "is_terms_agree": "terms",
    "is_privacy_agree": "privacy",
    "is_marketing_agree": "marketing",
}


class SessionState(str, Enum):
    EDITING = "editing"
    SUBMITTED_ATTEMPT = "submitted_attempt"


@dataclass(frozen=True)
class SubmitResult:
    validations: Validations
    user: Optional[User] = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class SignupSession:
    """
    One registration form. Field edits and submit attempts are expected to
    arrive one at a time from the same caller.
    """

    def __init__(
        self,
        directory: UserDirectory,
        eager_validation: bool = True,
        on_success: Optional[Callable[[User], None]] = None,
        clock: Optional[Clock] = None,
    ):
        self.validator = RegistrationValidator(directory)
        self.graph = SignupGraphFactory(self.validator, clock=clock).compile()
        self.eager_validation = eager_validation
        self.on_success = on_success

        self.form = FormData()
        self._validations = Validations()
        self.show_messages = False
        self.state = SessionState.EDITING

    @property
    def validations(self) -> Validations:
        return self._validations

    @property
    def agreements(self) -> Agreements:
        f = self.form
        return Agreements(
            all=f.is_all_agree,
            terms=f.is_terms_agree,
            privacy=f.is_privacy_agree,
            marketing=f.is_marketing_agree,
        )

    def _revalidate(self, attr: str) -> None:
        if not self.eager_validation:
            return
        update = {
            spec.attr: self.validator.check_field(spec, self.form)
            for spec in dependents_of(attr)
        }
        if update:
            self._validations = self._validations.model_copy(update=update)

    def update_field(self, name: str, value) -> None:
        try:
            attr = _ATTRS[name]
        except KeyError:
            raise KeyError(f"Unknown form field: {name!r}") from None

        if attr in _AGREEMENT_FLAGS:
            self.toggle_agreement(
                _AGREEMENT_FLAGS[attr], _flag_adapter.validate_python(value)
            )
            return

        setattr(self.form, attr, value)
        self._revalidate(attr)

    def toggle_agreement(self, which: AgreementName, value: bool) -> None:
        a = toggle(self.agreements, which, value)
        self.form.is_all_agree = a.all
        self.form.is_terms_agree = a.terms
        self.form.is_privacy_agree = a.privacy
        self.form.is_marketing_agree = a.marketing
        self._revalidate("is_terms_agree")
        self._revalidate("is_privacy_agree")

    def attempt_submit(self) -> SubmitResult:
        self.show_messages = True
        self.state = SessionState.SUBMITTED_ATTEMPT

        out = dict(self.graph.invoke({"form": self.form.model_copy()}))
        self._validations = Validations.model_validate(out["validations"])
        user = out.get("user")

        if user is None:
            logger.info("signup rejected, failing fields: %s", self._validations.failing())
            return SubmitResult(validations=self._validations)

        logger.info("signup accepted for user id=%s", user.id)
        if self.on_success is not None:
            self.on_success(user)
        return SubmitResult(validations=self._validations, user=user)

    def field_error(self, name: str) -> Optional[ErrorKind]:
        """Error category to show for a field, None while messages are hidden."""
        spec = get_field(name)
        if not self.show_messages:
            return None
        valid = getattr(self._validations, spec.attr)
        value = getattr(self.form, spec.attr)
        if isinstance(value, bool):
            if valid:
                return None
            return ErrorKind.REQUIRED if spec.required else None
        return classify(value, valid, spec.required, spec.on_failure)
