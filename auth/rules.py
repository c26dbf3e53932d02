"""
Validation rules for authentication requests.
"""
from app.messages import AuthMessage
from app.validation import field, not_empty

from api.rules.common import password_rule, username_rule

USER_LOGIN_RULES = (
    username_rule(),
    password_rule(),
)

HEADER_VALIDATION_RULES = (
    field("Authorization", (not_empty, AuthMessage.AUTH_HEADER_REQUIRED)),
)
