from .responses import ok, error, validation_error_response, internal_error_response
from .auth import login_required, redirect_if_logged_in, current_shopkeeper
from .validation import has_required_fields, validate_schema, request_data
from .db import transactional, wait_for_database

__all__ = [
    'ok',
    'error',
    'validation_error_response',
    'internal_error_response',
    'login_required',
    'redirect_if_logged_in',
    'current_shopkeeper',
    'has_required_fields',
    'validate_schema',
    'request_data',
    'transactional',
    'wait_for_database',
]
