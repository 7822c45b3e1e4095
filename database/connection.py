"""
Database connection management
"""
import os
import sqlite3
from contextlib import contextmanager
from typing import Generator

import config


class DatabaseConnection:
    # Manages the sqlite file backing durable device storage

    def __init__(self, db_path: str = config.DB_PATH):
        self.db_path = db_path
        self.init_database()

    def init_database(self):
        # Create the data directory and the key-value table if missing
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with self.get_connection() as conn:
            cursor = conn.cursor()

            # JSON blobs keyed by a namespaced string (cart, current user)
            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Storage (
                storage_key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # Open a connection per unit of work and always close it
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()
