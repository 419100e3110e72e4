#!/usr/bin/env python3
"""
Seed script creating one sample user per role
Run with: python seed_data.py
"""

import sys

from acadreq import create_app
from acadreq.models import db, User
from acadreq.services import AuthService

SAMPLE_USERS = [
    {'name': 'Admin User', 'email': 'admin@university.edu', 'password': 'admin123', 'role': 'admin'},
    {'name': 'John Student', 'email': 'student@university.edu', 'password': 'student123', 'role': 'student'},
    {'name': 'Jane Staff', 'email': 'staff@university.edu', 'password': 'staff123', 'role': 'staff'},
    {'name': 'Dr. HOD', 'email': 'hod@university.edu', 'password': 'hod123', 'role': 'hod'},
    {'name': 'Alice Student', 'email': 'alice@university.edu', 'password': 'alice123', 'role': 'student'},
    {'name': 'Bob Student', 'email': 'bob@university.edu', 'password': 'bob123', 'role': 'student'},
]


def seed_database(reset=False):
    """Create the sample users, optionally wiping existing ones first"""
    app = create_app()
    with app.app_context():
        if reset:
            db.drop_all()
            db.create_all()
            print("Existing data cleared")

        created = 0
        for sample in SAMPLE_USERS:
            if User.query.filter_by(email=sample['email']).first():
                print(f"  - {sample['email']} already exists, skipping")
                continue
            AuthService.register(**sample)
            created += 1
            print(f"  + {sample['role']:<8} {sample['email']} / {sample['password']}")

        print(f"{created} users created")


if __name__ == "__main__":
    seed_database(reset='--reset' in sys.argv)
