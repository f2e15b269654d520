#!/usr/bin/env python
"""Seed a user account.

Usage: python add_user.py [username] [email] [password]
"""
import sys

from taskflow.database import create_tables, get_session
from taskflow.schemas.user import RegisterRequest
from taskflow.services.auth import register_user


def main(argv):
    username = argv[1] if len(argv) > 1 else "testuser"
    email = argv[2] if len(argv) > 2 else "test@example.com"
    password = argv[3] if len(argv) > 3 else "password"

    # Create tables if not exist
    create_tables()

    with get_session() as db:
        ok, error = register_user(
            db, RegisterRequest(username=username, email=email, password=password)
        )

    if ok:
        print(f"User created: {username} / {password}")
        return 0
    print(error)
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
