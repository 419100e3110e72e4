"""
Main application entry point
Runs the acadreq development server
"""

import os
import sys

from sqlalchemy import text

from acadreq import create_app
from acadreq.utils import log_info, log_error


def main():
    """Main application entry point"""
    print("=" * 50)
    print("Starting acadreq API")
    print("=" * 50)

    try:
        # Create the application
        app = create_app()

        # Test database connection
        with app.app_context():
            from acadreq.models import db
            try:
                db.session.execute(text('SELECT 1'))
                log_info("Database connection available")
            except Exception as e:
                log_error("Database connection error", e)
                print(f"Database connection error: {e}")
                print("Check DATABASE_URL or the MYSQL_* settings in .env (python setup_environment.py writes a template)")
                return False

        # Run the application
        port = int(os.environ.get('PORT', 5000))
        debug_mode = app.config.get('DEBUG', False)
        print(f"Starting server on http://localhost:{port}")
        print(f"Debug mode: {'ON' if debug_mode else 'OFF'}")

        app.run(
            host='0.0.0.0',
            port=port,
            debug=debug_mode
        )
        return True

    except Exception as e:
        print(f"Failed to start application: {e}")
        return False


if __name__ == '__main__':
    success = main()
    if not success:
        sys.exit(1)
