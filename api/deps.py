"""
Request-body validation stage shared by every route.
"""
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.errors import ValidationFailure
from app.validation import RuleSet, validate

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ValidatedBody:
    """
    Dependency that reads the JSON body and runs a rule set over it.

    A missing or malformed body is validated as an empty object, so required
    fields report their own messages instead of a parse error.
    """

    def __init__(self, rules: RuleSet):
        self.rules = rules

    async def __call__(self, request: Request) -> dict:
        try:
            body = await request.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        errors = validate(self.rules, body)
        if errors:
            raise ValidationFailure(errors)
        return body


def parse_payload(schema: Type[SchemaT], body: dict) -> SchemaT:
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        raise ValidationFailure([error["msg"] for error in exc.errors()])
