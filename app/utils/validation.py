from typing import Iterable
from functools import wraps
from flask import request
from pydantic import ValidationError
from .responses import validation_error_response


def request_data() -> dict:
    """Return the submitted fields, from a JSON body or a form post."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def has_required_fields(data: dict, required: Iterable[str]) -> bool:
    """Return True if all required fields are present and non-blank."""
    if not isinstance(data, dict):
        return False
    return all(not is_blank(data.get(field)) for field in required)


def is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_schema(schema, redirect=None):
    """Decorator to validate the request body against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                obj = schema(**request_data())
            except ValidationError as ve:
                return validation_error_response(ve.errors(), redirect=redirect)
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
