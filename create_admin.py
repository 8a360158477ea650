#!/usr/bin/env python3
"""
Script to grant the admin role to a user, creating the user if needed.
Usage: python create_admin.py <open_id> [--name NAME] [--email EMAIL]
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from lobianco import create_app  # noqa: E402
from lobianco.api.procedures import upsert_user  # noqa: E402
from lobianco.errors import SiteError  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create or promote an admin user")
    parser.add_argument('open_id', help="identity provider id of the user")
    parser.add_argument('--name', help="display name")
    parser.add_argument('--email', help="e-mail address")
    return parser.parse_args(argv)


def create_admin(open_id, name=None, email=None):
    data = {'open_id': open_id, 'role': 'admin', 'login_method': 'script'}
    if name:
        data['name'] = name
    if email:
        data['email'] = email
    return upsert_user(data)


def main(argv=None):
    args = parse_args(argv)
    app = create_app()
    with app.app_context():
        try:
            user = create_admin(args.open_id, name=args.name, email=args.email)
        except SiteError as e:
            logger.error(f"❌ Could not create admin {args.open_id}: {e.message}")
            return 1
        logger.info(f"✅ {user.open_id} is now {user.role}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
