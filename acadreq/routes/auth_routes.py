"""
Authentication routes
"""

from flask import Blueprint, jsonify, g
from acadreq.models import db
from acadreq.services import AuthService
from acadreq.utils import AcadReqException, log_error, create_response, json_body, token_required

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new user and issue a token"""
    try:
        data = json_body()

        user = AuthService.register(
            data.get('name'), data.get('email'), data.get('password'), data.get('role') or 'student'
        )
        token = AuthService.issue_token(user)
        return jsonify(create_response(True, "User registered successfully", token=token, user=user.to_dict())), 201

    except AcadReqException as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Register error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Registration failed. Please try again.")), 500


@auth_bp.route('/login', methods=['POST'])
def login():
    """Handle user login"""
    try:
        data = json_body(allow_form=True)
        email = (data.get('email') or '').strip().lower()
        password = data.get('password') or ''

        if not email or not password:
            return jsonify(create_response(False, "Please enter both email and password.")), 400

        user = AuthService.authenticate(email, password)
        token = AuthService.issue_token(user)
        return jsonify(create_response(True, "Login successful", token=token, user=user.to_dict()))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Login error", e)
        return jsonify(create_response(False, "Login failed. Please try again.")), 500


@auth_bp.route('/me', methods=['GET'])
@token_required
def get_current_user():
    """Get current logged-in user"""
    return jsonify(create_response(True, "User found", user=g.user.to_dict()))
