"""
Utilities package initialization
"""

from acadreq.utils.exceptions import (
    AcadReqException, ValidationError, AuthenticationError, AuthorizationError,
    NotFoundError, InvalidStateError, StoreUnavailableError
)
from acadreq.utils.validators import (
    validate_email, validate_password, validate_required,
    validate_string_length, validate_text_field, validate_choice
)
from acadreq.utils.helpers import (
    setup_logging, log_error, log_info, utcnow, parse_datetime, create_response, json_body
)
from acadreq.utils.decorators import token_required, role_required

__all__ = [
    'AcadReqException', 'ValidationError', 'AuthenticationError', 'AuthorizationError',
    'NotFoundError', 'InvalidStateError', 'StoreUnavailableError',
    'validate_email', 'validate_password', 'validate_required',
    'validate_string_length', 'validate_text_field', 'validate_choice',
    'setup_logging', 'log_error', 'log_info', 'utcnow', 'parse_datetime', 'create_response', 'json_body',
    'token_required', 'role_required'
]
