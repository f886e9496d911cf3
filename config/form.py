import os
from dotenv import load_dotenv
from typing import Literal
from pydantic import BaseModel

load_dotenv()


class FormConfig(BaseModel):
    eager_validation: bool = True
    referral_case_sensitive: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @classmethod
    def from_env(cls) -> "FormConfig":
        values = {
            "eager_validation": os.getenv("SIGNUP_EAGER_VALIDATION"),
            "referral_case_sensitive": os.getenv("SIGNUP_REFERRAL_CASE_SENSITIVE"),
            "log_level": os.getenv("SIGNUP_LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})
