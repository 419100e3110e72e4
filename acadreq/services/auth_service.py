"""
Authentication service
"""

from datetime import timedelta
from typing import Any, Dict
import jwt
from flask import current_app
from acadreq.models import db, Role, User
from acadreq.utils.helpers import utcnow
from acadreq.utils.validators import (
    validate_email, validate_password, validate_text_field, validate_choice
)
from acadreq.utils.exceptions import ValidationError, AuthenticationError


class AuthService:
    """Authentication service class"""

    @staticmethod
    def register(name: str, email: str, password: str, role: str = Role.STUDENT.value) -> User:
        """
        Register a new user

        Args:
            name: Display name
            email: Unique email
            password: Plain password, at least 6 characters
            role: student, staff, hod or admin

        Returns:
            The created user
        """
        name = validate_text_field(name, 'Name', 100)

        if not validate_email(email):
            raise ValidationError("Please provide a valid email")

        if not validate_password(password):
            raise ValidationError("Password must be at least 6 characters")

        role = Role(validate_choice(role or Role.STUDENT.value, [r.value for r in Role], 'role'))
        email = email.lower().strip()

        if User.query.filter_by(email=email).first():
            raise ValidationError("User already exists with this email")

        user = User(name=name, email=email, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        current_app.logger.info(f"Registered {role.value} user {user.id}")
        return user

    @staticmethod
    def authenticate(email: str, password: str) -> User:
        """
        Authenticate user

        Args:
            email: User email
            password: User password

        Returns:
            The matching user
        """
        if not validate_email(email):
            raise ValidationError("Please provide a valid email")

        if not password:
            raise ValidationError("Password is required")

        user = User.query.filter_by(email=email.lower().strip()).first()
        if not user or not user.check_password(password):
            raise AuthenticationError("Invalid email or password")
        return user

    @staticmethod
    def issue_token(user: User) -> str:
        """Issue a signed access token for the user"""
        exp = utcnow() + timedelta(minutes=current_app.config['JWT_EXPIRES_MIN'])
        payload = {'uid': user.id, 'role': user.role.value, 'exp': exp}
        return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm='HS256')

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        Decode and verify an access token

        Raises:
            AuthenticationError: If the token is expired or invalid
        """
        if not token:
            raise AuthenticationError("No token provided, authorization denied")
        try:
            return jwt.decode(token, current_app.config['JWT_SECRET'], algorithms=['HS256'])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

    @staticmethod
    def get_user_from_token(token: str) -> User:
        """Resolve the user an access token was issued to"""
        payload = AuthService.decode_token(token)
        uid = payload.get('uid')
        user = db.session.get(User, uid) if uid is not None else None
        if not user:
            raise AuthenticationError("User not found, authorization denied")
        return user
