"""
Field rules shared by the task, user and login rule sets.
"""
from app.messages import UserValidationMessage
from app.validation import (
    EMAIL_REGEX,
    ID_REGEX,
    PASSWORD_REGEX,
    FieldRule,
    exact_length,
    field,
    matches,
    max_length,
    min_length,
    not_empty,
)

USERNAME_MIN, USERNAME_MAX = 3, 20
PASSWORD_MIN = 7
OBJECT_ID_LENGTH = 24


def object_id_rule(name: str, required_message, invalid_message, length_message) -> FieldRule:
    # Character class and length are reported independently
    return field(
        name,
        (not_empty, required_message),
        (matches(ID_REGEX), invalid_message),
        (exact_length(OBJECT_ID_LENGTH), length_message),
    )


def username_rule(name: str = "username", optional: bool = False) -> FieldRule:
    checks = [
        (min_length(USERNAME_MIN), UserValidationMessage.USERNAME_MIN_LENGTH),
        (max_length(USERNAME_MAX), UserValidationMessage.USERNAME_MAX_LENGTH),
    ]
    if not optional:
        checks.insert(0, (not_empty, UserValidationMessage.USERNAME_REQUIRED))
    return field(name, *checks, optional=optional)


def email_rule(optional: bool = False) -> FieldRule:
    checks = [(matches(EMAIL_REGEX), UserValidationMessage.EMAIL_INVALID)]
    if not optional:
        checks.insert(0, (not_empty, UserValidationMessage.EMAIL_REQUIRED))
    return field("email", *checks, optional=optional)


def password_rule(optional: bool = False) -> FieldRule:
    checks = [
        (min_length(PASSWORD_MIN), UserValidationMessage.PASSWORD_MIN_LENGTH),
        (matches(PASSWORD_REGEX), UserValidationMessage.PASSWORD_MUST_HAVE_CHARACTERS),
    ]
    if not optional:
        checks.insert(0, (not_empty, UserValidationMessage.PASSWORD_REQUIRED))
    return field("password", *checks, optional=optional)
