import pytest
from pydantic import ValidationError

from config.form import FormConfig


def test_defaults(monkeypatch):
    for name in ("SIGNUP_EAGER_VALIDATION", "SIGNUP_REFERRAL_CASE_SENSITIVE", "SIGNUP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    cfg = FormConfig.from_env()
    assert cfg.eager_validation is True
    assert cfg.referral_case_sensitive is True
    assert cfg.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIGNUP_EAGER_VALIDATION", "false")
    monkeypatch.setenv("SIGNUP_REFERRAL_CASE_SENSITIVE", "0")
    monkeypatch.setenv("SIGNUP_LOG_LEVEL", "DEBUG")

    cfg = FormConfig.from_env()
    assert cfg.eager_validation is False
    assert cfg.referral_case_sensitive is False
    assert cfg.log_level == "DEBUG"


def test_bad_bool(monkeypatch):
    monkeypatch.setenv("SIGNUP_EAGER_VALIDATION", "maybe")
    with pytest.raises(ValidationError):
        FormConfig.from_env()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("SIGNUP_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        FormConfig.from_env()
