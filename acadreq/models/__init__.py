"""
Database models initialization
"""

from acadreq.models.user import db, Role, User
from acadreq.models.request import (
    Request, Status, RequesterRole, DECISIONS,
    TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
)

# Export all models
__all__ = [
    'db', 'Role', 'User', 'Request', 'Status', 'RequesterRole', 'DECISIONS',
    'TITLE_MAX_LENGTH', 'DESCRIPTION_MAX_LENGTH'
]
