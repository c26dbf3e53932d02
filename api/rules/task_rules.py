"""
Validation rule sets for task operations.
"""
from app.messages import TaskValidationMessage as TaskMsg
from app.models import Status
from app.validation import field, is_in, max_length, min_length, not_empty

from api.rules.common import object_id_rule, username_rule

SUBJECT_MIN, SUBJECT_MAX = 10, 100
DESCRIPTION_MAX = 300


def _subject(optional: bool = False):
    checks = [
        (min_length(SUBJECT_MIN), TaskMsg.SUBJECT_MIN_LENGTH),
        (max_length(SUBJECT_MAX), TaskMsg.SUBJECT_MAX_LENGTH),
    ]
    if not optional:
        checks.insert(0, (not_empty, TaskMsg.SUBJECT_REQUIRED))
    return field("subject", *checks, optional=optional)


def _description():
    return field("description", (max_length(DESCRIPTION_MAX), TaskMsg.DESCRIPTION_MAX_LENGTH), optional=True)


def _status(optional: bool = False):
    checks = [(is_in(Status), TaskMsg.STATUS_INVALID)]
    if not optional:
        checks.insert(0, (not_empty, TaskMsg.STATUS_REQUIRED))
    return field("status", *checks, optional=optional)


def _task_id():
    return object_id_rule("id", TaskMsg.TASK_ID_REQUIRED, TaskMsg.TASK_ID_INVALID, TaskMsg.TASK_ID_LENGTH)


TASK_CREATION_RULES = (
    _subject(),
    _description(),
    _status(),
    username_rule(),
)

TASK_UPDATE_RULES = (
    _task_id(),
    _subject(optional=True),
    _description(),
    _status(optional=True),
)

TASK_DELETION_RULES = (_task_id(),)

TASK_FETCHING_BY_USERNAME_RULES = (username_rule(),)

TASK_FETCHING_BY_SUBJECT_RULES = (_subject(),)

TASK_FETCHING_BY_STATUS_RULES = (_status(),)
