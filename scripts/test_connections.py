#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify all connections are working.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from haca.db.postgres import test_postgres_connection
from haca.db.mongodb import test_mongo_connection
from haca.services.ai_client import get_ai_client
from haca.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("HACA PLATFORM - CONNECTION TEST")
    print("=" * 50)

    # Test relational store
    print("\n[1] Testing database...")
    if settings.database_url:
        print(f"    URL: {settings.database_url.split('@')[-1]}")
    else:
        print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    if test_postgres_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")

    # Test MongoDB
    print("\n[2] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")

    # Test AI (only if API key is set)
    print("\n[3] Testing AI API...")
    if settings.ai_api_key:
        print(f"    Base URL: {settings.ai_base_url}")
        print(f"    Model: {settings.ai_model}")
        client = get_ai_client()
        if client.test_connection():
            print("    ✅ AI: CONNECTED")
        else:
            print("    ❌ AI: FAILED")
    else:
        print("    ⚠️  AI: API key not configured (skill analysis disabled)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
