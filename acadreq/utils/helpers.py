"""
Helper utilities
"""

import logging
from datetime import datetime, timezone, date, time
from typing import Optional, Dict, Any
from flask import current_app, request
from acadreq.utils.exceptions import ValidationError


def setup_logging() -> None:
    """Setup application logging"""
    level_name = current_app.config.get('LOG_LEVEL')
    if level_name:
        level = getattr(logging, str(level_name).upper(), logging.INFO)
    elif current_app.debug:
        # Development logging
        level = logging.DEBUG
    else:
        # Production logging
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s'
    )
    current_app.logger.setLevel(level)


def log_error(message: str, exception: Optional[Exception] = None) -> None:
    """
    Log error message

    Args:
        message: Error message
        exception: Exception object
    """
    if exception:
        current_app.logger.error(f"{message}: {str(exception)}")
    else:
        current_app.logger.error(message)


def log_info(message: str) -> None:
    """
    Log info message

    Args:
        message: Info message
    """
    current_app.logger.info(message)


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in the database"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_datetime(value: Optional[str], field_name: str, end_of_day: bool = False) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime query value

    Args:
        value: Raw value (``2024-05-01`` or ``2024-05-01T10:00:00``)
        field_name: Name of the field for error message
        end_of_day: Expand a date-only value to the last instant of that day

    Returns:
        Naive UTC datetime, or None when value is empty

    Raises:
        ValidationError: If value cannot be parsed
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.max if end_of_day else time.min)

    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except (ValueError, AttributeError):
        raise ValidationError(f"{field_name} must be an ISO-8601 date")

    if parsed.tzinfo is None and end_of_day and 'T' not in value and ' ' not in value.strip():
        parsed = datetime.combine(parsed.date(), time.max)
    return _naive_utc(parsed)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def json_body(allow_form: bool = False) -> Dict[str, Any]:
    """
    Parsed request body as a dictionary

    Args:
        allow_form: Fall back to form fields when the body is not JSON

    Raises:
        ValidationError: If the JSON body is not an object
    """
    data = request.get_json(silent=True)
    if data is None:
        return request.form if allow_form else {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def create_response(success: bool, message: str, **payload: Any) -> Dict[str, Any]:
    """
    Create standardized API response

    Args:
        success: Whether operation was successful
        message: Response message
        payload: Extra top-level keys (request, requests, stats, ...)

    Returns:
        Standardized response dictionary
    """
    response = {
        'success': success,
        'message': message
    }
    response.update(payload)
    return response
