"""
Custom exceptions for the acadreq application
"""

class AcadReqException(Exception):
    """Base exception for acadreq application"""
    status_code = 500

class ValidationError(AcadReqException):
    """Malformed input"""
    status_code = 400

class AuthenticationError(AcadReqException):
    """Authentication error"""
    status_code = 401

class AuthorizationError(AcadReqException):
    """Authorization error"""
    status_code = 403

class NotFoundError(AcadReqException):
    """Referenced record does not exist"""
    status_code = 404

class InvalidStateError(AcadReqException):
    """Transition guard failed (wrong gate order or replay)"""
    status_code = 409

class StoreUnavailableError(AcadReqException):
    """Record store cannot be reached"""
    status_code = 503
