"""
User models for the acadreq application
"""

import enum
from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import generate_password_hash, check_password_hash
from acadreq.utils.helpers import utcnow, isoformat

db = SQLAlchemy()


class Role(str, enum.Enum):
    """Identity classes known to the identity provider"""
    STUDENT = 'student'
    STAFF = 'staff'
    HOD = 'hod'
    ADMIN = 'admin'


class User(db.Model):
    """User model"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role, values_callable=lambda e: [m.value for m in e], name='user_role'),
                     nullable=False, default=Role.STUDENT)
    created_at = db.Column(db.DateTime, default=utcnow)

    # Relationships
    requests = db.relationship('Request', back_populates='requester', lazy=True)

    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check password"""
        return check_password_hash(self.password_hash, password)

    def summary(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value
        }

    def to_dict(self):
        """Convert to dictionary"""
        data = self.summary()
        data['createdAt'] = isoformat(self.created_at)
        return data
