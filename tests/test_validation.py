import pytest

from api.rules.task_rules import (
    TASK_CREATION_RULES,
    TASK_DELETION_RULES,
    TASK_FETCHING_BY_STATUS_RULES,
    TASK_UPDATE_RULES,
)
from api.rules.user_rules import USER_REGISTRATION_RULES, USER_UPDATE_RULES
from app.messages import TaskValidationMessage as TaskMsg
from app.messages import UserValidationMessage as UserMsg
from app.validation import validate
from auth.rules import HEADER_VALIDATION_RULES, USER_LOGIN_RULES

VALID_ID = "65a1f0c2b3d4e5f6a7b8c9d0"


def task(**overrides):
    data = {"subject": "Prepare the sprint demo", "status": "Pending", "username": "alice"}
    data.update(overrides)
    return data


def registration(**overrides):
    data = {"username": "alice", "email": "alice@example.com", "password": "Secret#123"}
    data.update(overrides)
    return data


class TestTaskCreationRules:
    def test_valid_task_has_no_errors(self):
        assert validate(TASK_CREATION_RULES, task(description="d" * 300)) == []

    @pytest.mark.parametrize("length", [10, 55, 100])
    def test_subject_bounds_are_inclusive(self, length):
        assert validate(TASK_CREATION_RULES, task(subject="s" * length)) == []

    def test_short_subject(self):
        assert validate(TASK_CREATION_RULES, task(subject="s" * 9)) == [TaskMsg.SUBJECT_MIN_LENGTH]

    def test_long_subject(self):
        assert validate(TASK_CREATION_RULES, task(subject="s" * 101)) == [TaskMsg.SUBJECT_MAX_LENGTH]

    def test_long_description(self):
        assert validate(TASK_CREATION_RULES, task(description="d" * 301)) == [TaskMsg.DESCRIPTION_MAX_LENGTH]

    def test_empty_description_is_skipped(self):
        assert validate(TASK_CREATION_RULES, task(description="")) == []

    def test_missing_status_reports_required_and_invalid(self):
        data = task()
        del data["status"]
        assert validate(TASK_CREATION_RULES, data) == [TaskMsg.STATUS_REQUIRED, TaskMsg.STATUS_INVALID]

    def test_unknown_status(self):
        assert validate(TASK_FETCHING_BY_STATUS_RULES, {"status": "Done"}) == [TaskMsg.STATUS_INVALID]

    def test_errors_accumulate_across_fields_in_declaration_order(self):
        errors = validate(TASK_CREATION_RULES, {"subject": "short", "status": "Later", "username": "al"})
        assert errors == [
            TaskMsg.SUBJECT_MIN_LENGTH,
            TaskMsg.STATUS_INVALID,
            UserMsg.USERNAME_MIN_LENGTH,
        ]


class TestIdentifierRules:
    def test_valid_id(self):
        assert validate(TASK_DELETION_RULES, {"id": VALID_ID}) == []

    @pytest.mark.parametrize("task_id", [VALID_ID[:-1], VALID_ID + "a"])
    def test_wrong_length_only(self, task_id):
        assert validate(TASK_DELETION_RULES, {"id": task_id}) == [TaskMsg.TASK_ID_LENGTH]

    @pytest.mark.parametrize("task_id", [VALID_ID.upper(), VALID_ID[:-1] + "!", VALID_ID[:-1] + " "])
    def test_wrong_characters_only(self, task_id):
        assert validate(TASK_DELETION_RULES, {"id": task_id}) == [TaskMsg.TASK_ID_INVALID]

    def test_wrong_characters_and_length(self):
        assert validate(TASK_DELETION_RULES, {"id": "XYZ"}) == [TaskMsg.TASK_ID_INVALID, TaskMsg.TASK_ID_LENGTH]

    def test_missing_id_reports_every_check(self):
        assert validate(TASK_DELETION_RULES, {}) == [
            TaskMsg.TASK_ID_REQUIRED,
            TaskMsg.TASK_ID_INVALID,
            TaskMsg.TASK_ID_LENGTH,
        ]

    def test_user_id_uses_user_messages(self):
        assert validate(USER_UPDATE_RULES, {"id": VALID_ID[:-1]}) == [UserMsg.USER_ID_LENGTH]


class TestPasswordRules:
    def test_valid_password(self):
        assert validate(USER_REGISTRATION_RULES, registration()) == []

    def test_too_short_only(self):
        assert validate(USER_REGISTRATION_RULES, registration(password="Ab1!")) == [UserMsg.PASSWORD_MIN_LENGTH]

    def test_missing_character_classes_only(self):
        assert validate(USER_REGISTRATION_RULES, registration(password="abcdefgh1!")) == [
            UserMsg.PASSWORD_MUST_HAVE_CHARACTERS
        ]

    def test_both_violations(self):
        assert validate(USER_REGISTRATION_RULES, registration(password="abc")) == [
            UserMsg.PASSWORD_MIN_LENGTH,
            UserMsg.PASSWORD_MUST_HAVE_CHARACTERS,
        ]

    def test_login_requires_both_fields(self):
        assert validate(USER_LOGIN_RULES, {}) == [
            UserMsg.USERNAME_REQUIRED,
            UserMsg.USERNAME_MIN_LENGTH,
            UserMsg.PASSWORD_REQUIRED,
            UserMsg.PASSWORD_MIN_LENGTH,
            UserMsg.PASSWORD_MUST_HAVE_CHARACTERS,
        ]


class TestOptionalFields:
    def test_update_with_only_id(self):
        assert validate(TASK_UPDATE_RULES, {"id": VALID_ID}) == []
        assert validate(USER_UPDATE_RULES, {"id": VALID_ID, "email": ""}) == []

    def test_supplied_optional_fields_are_checked(self):
        errors = validate(TASK_UPDATE_RULES, {"id": VALID_ID, "subject": "short", "status": "Done"})
        assert errors == [TaskMsg.SUBJECT_MIN_LENGTH, TaskMsg.STATUS_INVALID]

    def test_invalid_email_on_update(self):
        assert validate(USER_UPDATE_RULES, {"id": VALID_ID, "email": "not-an-email"}) == [UserMsg.EMAIL_INVALID]


def test_blank_authorization_header():
    assert validate(HEADER_VALIDATION_RULES, {"Authorization": ""}) != []
    assert validate(HEADER_VALIDATION_RULES, {"Authorization": "Bearer abc"}) == []
