#!/usr/bin/env python3
"""
Environment Setup Script
Writes a .env file for local development
"""

import os
import secrets


def setup_environment():
    """Create a .env file with local development defaults"""

    print("Setting up environment for local development...")

    if not os.path.exists('.env'):
        print("\nCreating .env file...")
        with open('.env', 'w') as f:
            f.write("# acadreq Environment Configuration\n")
            f.write("FLASK_ENV=development\n")
            f.write(f"SECRET_KEY={secrets.token_hex(32)}\n")
            f.write(f"JWT_SECRET={secrets.token_hex(32)}\n")
            f.write("JWT_EXPIRES_MIN=1440\n")
            f.write("\n# Database Configuration\n")
            f.write("# SQLite (acadreq.db) is used unless one of the options below is set.\n")
            f.write("# Either a full URL:\n")
            f.write("# DATABASE_URL=mysql+pymysql://root:@localhost/acadreq\n")
            f.write("# or the MySQL parts (MYSQL_HOST or MYSQL_DB switches to MySQL):\n")
            f.write("# MYSQL_HOST=localhost\n")
            f.write("# MYSQL_USER=root\n")
            f.write("# MYSQL_PASSWORD=\n")
            f.write("# MYSQL_DB=acadreq\n")
        print(".env file created")
    else:
        print(".env file already exists")

    print("\nCurrent environment variables:")
    for key in ('FLASK_ENV', 'DATABASE_URL', 'MYSQL_HOST', 'MYSQL_USER', 'MYSQL_DB'):
        print(f"   {key}: {os.environ.get(key, 'Not set')}")


if __name__ == "__main__":
    setup_environment()
    print("\nEnvironment setup complete!")
    print("\nNext steps:")
    print("1. Run: python seed_data.py")
    print("2. Run: python main.py")
