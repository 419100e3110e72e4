"""
acadreq Application Factory
Academic request approval workflow API
"""

import os
from typing import Any, Mapping, Optional
from flask import Flask, jsonify
from flask_cors import CORS
from acadreq.models import db
from acadreq.routes import auth_bp, student_bp, staff_bp, hod_bp, admin_bp
from acadreq.utils import setup_logging, log_info, log_error, create_response


def create_app(config_name: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Application factory

    Args:
        config_name: Configuration name (development, production, testing)
        overrides: Extra configuration values applied last

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Import and set configuration
    from config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)
    config_class.init_app(app)

    # Initialize extensions
    db.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    # Setup logging
    with app.app_context():
        setup_logging()
        log_info(f"Application initialized ({config_name})")

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(student_bp, url_prefix='/api/student')
    app.register_blueprint(staff_bp, url_prefix='/api/staff')
    app.register_blueprint(hod_bp, url_prefix='/api/hod')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    register_error_handlers(app)

    @app.route('/')
    def index():
        return jsonify({
            'message': 'Academic Request Workflow API',
            'version': '1.0.0',
            'endpoints': {
                'auth': '/api/auth',
                'student': '/api/student',
                'staff': '/api/staff',
                'hod': '/api/hod',
                'admin': '/api/admin'
            }
        })

    # Create database tables
    with app.app_context():
        db.create_all()
        log_info("Database tables created successfully")

    return app


def register_error_handlers(app: Flask) -> None:
    """JSON responses for unknown routes and unhandled errors"""

    @app.errorhandler(404)
    def not_found(e):
        return jsonify(create_response(False, "Route not found")), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(create_response(False, "Method not allowed")), 405

    @app.errorhandler(500)
    def internal_error(e):
        log_error("Unhandled server error", getattr(e, 'original_exception', None) or e)
        db.session.rollback()
        return jsonify(create_response(False, "Internal server error")), 500
