"""
Database module - relational store and MongoDB connections.
"""
from haca.db.postgres import get_db_session, test_postgres_connection
from haca.db.mongodb import get_mongo_db, test_mongo_connection

__all__ = [
    "get_db_session",
    "test_postgres_connection",
    "get_mongo_db",
    "test_mongo_connection"
]
