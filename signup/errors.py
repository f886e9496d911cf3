class SignupError(Exception):
    """Base class for misuse of the signup core. Field failures are never raised."""


class SubmissionRejected(SignupError):
    def __init__(self, failing):
        self.failing = list(failing)
        super().__init__(f"Form does not validate: {', '.join(self.failing)}")
