from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from langgraph.graph import StateGraph, START, END

from signup.state import SignupState
from signup.validator import RegistrationValidator

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SignupGraphFactory:
    def __init__(self, validator: RegistrationValidator, clock: Optional[Clock] = None):
        self.validator = validator
        self.clock = clock or utc_now

    def complete_node(self, state: SignupState) -> Dict[str, Any]:
        """
        Only reached when the validate node computed aggregate == True in this
        same run. build_user re-checks, so an invalid form can never produce a
        User even if wired differently.
        """
        return {"user": self.validator.build_user(state.form, self.clock())}

    def build(self) -> StateGraph:
        g = StateGraph(SignupState)

        g.add_node("validate", self.validator.validate_node)
        g.add_node("complete", self.complete_node)

        g.add_edge(START, "validate")

        g.add_conditional_edges(
            "validate",
            self.validator.should_complete,
            {"end": END, "complete": "complete"},
        )
        g.add_edge("complete", END)

        return g

    def compile(self, checkpointer: Any = None):
        return self.build().compile(checkpointer=checkpointer)
