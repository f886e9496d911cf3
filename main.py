import logging

from config.form import FormConfig
from signup.directory import InMemoryDirectory
from signup.session import SignupSession
from signup.state import User


def main():
    patches = [
        {"email": "khushi@gmail.com", "phone": "010-1234-5678", "username": "khushi01"},
        {"password": "Abc12345!", "confirmPassword": "Abc1234"},
        {"confirmPassword": "Abc12345!", "referralUsername": "alice"},
    ]

    cfg = FormConfig.from_env()
    logging.basicConfig(
        level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    directory = InMemoryDirectory(
        [User(id=1, username="alice"), User(id=2, username="bob")],
        case_sensitive=cfg.referral_case_sensitive,
    )
    session = SignupSession(
        directory,
        eager_validation=cfg.eager_validation,
        on_success=directory.append,
    )

    # first attempt: agreements still unchecked
    for i, patch in enumerate(patches, 1):
        for name, value in patch.items():
            session.update_field(name, value)
        print(f"\nPATCH #{i}")

    result = session.attempt_submit()
    print("failing:", result.validations.failing())
    print("errors:", {name: session.field_error(name) for name in result.validations.failing()})

    session.toggle_agreement("all", True)
    result = session.attempt_submit()
    if result.ok:
        print("created:", result.user.model_dump(by_alias=True))
    print(f"\nDirectory size: {len(directory)}")


if __name__ == "__main__":
    main()
