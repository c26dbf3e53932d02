"""
User-facing message catalogs.

Each catalog is an immutable Enum keyed by the symbolic failure or success
reason; the member value is the text sent to clients.
"""
from enum import Enum


class TaskValidationMessage(str, Enum):
    SUBJECT_REQUIRED = "Subject is a required field"
    SUBJECT_MAX_LENGTH = "Subject must be no longer than 100 characters"
    SUBJECT_MIN_LENGTH = "Subject must be at least 10 characters long"
    DESCRIPTION_MAX_LENGTH = "Description must be no longer than 300 characters"
    STATUS_REQUIRED = "Status is a required field"
    STATUS_INVALID = "Status must be one of the following categories: Pending, Complete"
    TASK_ID_REQUIRED = "Task ID is a required field"
    TASK_ID_INVALID = "Task ID must only contain lowercase hexadecimal characters"
    TASK_ID_LENGTH = "Task ID must be 24 characters long"


class UserValidationMessage(str, Enum):
    USERNAME_REQUIRED = "Username is a required field"
    USERNAME_MAX_LENGTH = "Username must be no longer than 20 characters"
    USERNAME_MIN_LENGTH = "Username must be at least 3 characters long"
    EMAIL_REQUIRED = "Email is a required field"
    EMAIL_INVALID = "Invalid email address"
    PASSWORD_REQUIRED = "Password is a required field"
    PASSWORD_MIN_LENGTH = "Password must be at least 7 characters long"
    PASSWORD_MUST_HAVE_CHARACTERS = (
        "Password must contain at least one lowercase character, one uppercase "
        "character, one number and one special symbol"
    )
    ROLE_REQUIRED = "Role is a required field"
    ROLE_INVALID = "Role must be one of the following categories: Admin, General"
    USER_ID_REQUIRED = "User ID is a required field"
    USER_ID_INVALID = "User ID must only contain lowercase hexadecimal characters"
    USER_ID_LENGTH = "User ID must be 24 characters long"


class AuthMessage(str, Enum):
    AUTH_FAILED = "Authentication failed"
    AUTH_HEADER_REQUIRED = "Authorization header is required"
    TOKEN_INVALID = "Invalid token"
    USER_NOT_AUTHORIZED = "Token does not belong to a registered user"


class ResponseMessage(str, Enum):
    USER_REGISTERED = "Successful user registration"
    USER_UPDATED = "Successful user update"
    TASK_CREATED = "Successful task creation"
    TASK_UPDATED = "Successful task update"
    BAD_REQUEST = "Bad request"


class ServiceMessage(str, Enum):
    SERVER_ERROR = "Server error"
    USER_NOT_FOUND = "User was not found"
    TASK_NOT_FOUND = "Task was not found"
    TASKS_NOT_FOUND = "Tasks were not found"
    DUPLICATE_VALUE = "{field} already exists"
