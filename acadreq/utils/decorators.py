"""
Route guards for authenticated and role-scoped endpoints
"""

from functools import wraps
from flask import request, jsonify, g
from acadreq.utils.exceptions import AuthenticationError
from acadreq.utils.helpers import create_response


def _bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if not auth_header.startswith('Bearer '):
        return None
    token = auth_header.split(' ', 1)[1].strip()
    if not token or token.lower() in ('null', 'undefined'):
        return None
    return token


def token_required(f):
    """Resolve the bearer token into ``g.user`` or answer 401"""
    @wraps(f)
    def decorated(*args, **kwargs):
        from acadreq.services import AuthService

        token = _bearer_token()
        if token is None:
            return jsonify(create_response(False, "No token provided, authorization denied")), 401
        try:
            g.user = AuthService.get_user_from_token(token)
        except AuthenticationError as e:
            return jsonify(create_response(False, str(e))), 401
        return f(*args, **kwargs)
    return decorated


def role_required(*allowed_roles):
    """Answer 403 unless ``g.user`` holds one of the allowed roles"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            user = getattr(g, 'user', None)
            if user is None:
                return jsonify(create_response(False, "Authentication required")), 401
            if user.role.value not in allowed_roles:
                message = (f"Access denied. Required role: {' or '.join(allowed_roles)}. "
                           f"Your role: {user.role.value}")
                return jsonify(create_response(False, message)), 403
            return f(*args, **kwargs)
        return decorated_function
    return decorator
