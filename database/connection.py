# =============================================================================
# database/connection.py
# =============================================================================
# PURPOSE:
#   Handles database connections. This is the ONLY file that knows how to
#   connect to the database. All other code uses this function.
#
# WHERE IS THE FILE?
#   config.DB_PATH, read every time a connection is opened (not once at
#   import). Tests point it at a temporary file:
#       monkeypatch.setattr(config, "DB_PATH", str(tmp_path / "test.db"))
#
# SQLITE NOTES:
#   - The .db file is created on first connect
#   - Foreign keys are OFF by default in SQLite; we turn them ON so that
#     deleting a booking also deletes its financial entry and commission
#     lines (ON DELETE CASCADE)
#   - Python's sqlite3 opens a transaction before the first INSERT/UPDATE/
#     DELETE and keeps it open until commit() or rollback()
# =============================================================================

import sqlite3

import config


def get_db_connection():
    """
    Create and return a connection to the SQLite database.

    USAGE:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM client_bookings")
        rows = cursor.fetchall()
        conn.close()

    RETURNS:
        sqlite3.Connection: foreign key enforcement switched on
    """
    conn = sqlite3.connect(config.DB_PATH)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn
