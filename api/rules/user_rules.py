"""
Validation rule sets for user operations.
"""
from app.messages import UserValidationMessage as UserMsg

from api.rules.common import email_rule, object_id_rule, password_rule, username_rule

USER_REGISTRATION_RULES = (
    username_rule(),
    email_rule(),
    password_rule(),
)

USER_UPDATE_RULES = (
    object_id_rule("id", UserMsg.USER_ID_REQUIRED, UserMsg.USER_ID_INVALID, UserMsg.USER_ID_LENGTH),
    username_rule(optional=True),
    email_rule(optional=True),
    password_rule(optional=True),
)
