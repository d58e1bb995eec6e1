#!/usr/bin/env python3
"""
Admin Setup Script

Creates missing tables, the admin account and its admin_login row.
Safe to run repeatedly.

Usage: python scripts/setup_admin.py
"""
import sys
sys.path.insert(0, '.')

from fastapi import HTTPException

from haca.core.config import get_settings
from haca.services.admin_bootstrap import ensure_admin


def main():
    settings = get_settings()
    print("=" * 50)
    print("HACA - ADMIN SETUP")
    print("=" * 50)

    try:
        result = ensure_admin()
    except HTTPException as e:
        print(f"    ❌ Admin setup failed: {e.detail}")
        sys.exit(1)

    if result["created"]:
        print(f"    ✅ Admin {settings.admin_email} created (user_id={result['user_id']})")
    else:
        print(f"    ⚠️  Admin {settings.admin_email} already exists (user_id={result['user_id']})")

    print("\n" + "=" * 50)
    print("Admin setup completed successfully")
    print("=" * 50)


if __name__ == "__main__":
    main()
