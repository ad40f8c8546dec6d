"""Provision the admin account.

Run once by an operator after the schema exists:

    ADMIN_EMAIL=... ADMIN_PASSWORD=... python scripts/create_admin.py --name "HR Admin"

Does nothing when an admin account already exists.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_ledger.payroll_ledger.core.exceptions import DomainError
from src.payroll_ledger.payroll_ledger.database.connection import DatabaseConnection, DBConfig
from src.payroll_ledger.payroll_ledger.users.mysql_user_repository import MySQLUserRepository
from src.payroll_ledger.payroll_ledger.users.service import AdminProvisioner


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the admin account if none exists.")
    parser.add_argument("--email", default=os.getenv("ADMIN_EMAIL"), help="defaults to $ADMIN_EMAIL")
    parser.add_argument("--name", default=os.getenv("ADMIN_NAME", "Administrator"), help="defaults to $ADMIN_NAME")
    parser.add_argument(
        "--password",
        default=os.getenv("ADMIN_PASSWORD"),
        help="defaults to $ADMIN_PASSWORD (prefer the variable over the command line)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    if not args.email or not args.password:
        print("ERROR: set --email/--password or ADMIN_EMAIL/ADMIN_PASSWORD", file=sys.stderr)
        return 2

    db = DBConfig.from_dict(settings.DB_CONFIG)
    provisioner = AdminProvisioner(MySQLUserRepository(DatabaseConnection(db)))
    try:
        user_id, created = provisioner.ensure_admin(email=args.email, password=args.password, full_name=args.name)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if created:
        print(f"OK: admin account {user_id} created in {db.describe()}")
    else:
        print(f"OK: admin account {user_id} already exists, nothing changed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
