"""Print the SQL that creates an admin account.

Usage: python scripts/create_admin.py <username> <password>

Run the printed statement in your MySQL client. For an empty database the
``POST /api/setup`` endpoint does the same thing over HTTP.
"""

from __future__ import annotations

import sys

from werkzeug.security import generate_password_hash


def build_insert(username: str, password: str) -> str:
    safe_username = username.replace("\\", "\\\\").replace("'", "''")
    password_hash = generate_password_hash(password)
    return f"INSERT INTO admins (username, password_hash) VALUES ('{safe_username}', '{password_hash}');"


def main(argv: list[str]) -> int:
    if len(argv) != 3 or not argv[1] or not argv[2]:
        print("Usage: python scripts/create_admin.py <username> <password>")
        return 1

    print("\nRun this SQL in your MySQL client:\n")
    print(build_insert(argv[1], argv[2]) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
