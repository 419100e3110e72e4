"""
Routes package initialization
"""

from acadreq.routes.auth_routes import auth_bp
from acadreq.routes.student_routes import student_bp
from acadreq.routes.staff_routes import staff_bp
from acadreq.routes.hod_routes import hod_bp
from acadreq.routes.admin_routes import admin_bp

__all__ = ['auth_bp', 'student_bp', 'staff_bp', 'hod_bp', 'admin_bp']
