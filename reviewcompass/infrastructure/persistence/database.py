"""
SQLite Database Repository - Clients and Review Requests
=========================================================

Backs the bundled REST backend. Review requests are a historical record:
they are created, their status moves forward, and they are never deleted.
"""

import sqlite3
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import List, Optional

from ...domain.errors import InvalidStatusTransition
from ...domain.models import Client, RequestStatus, ReviewRequest

logger = logging.getLogger(__name__)

DATABASE_FILE = "reviewcompass.db"

# sent -> opened -> completed | expired
STATUS_TRANSITIONS = {
    RequestStatus.SENT.value: {
        RequestStatus.OPENED.value,
        RequestStatus.COMPLETED.value,
        RequestStatus.EXPIRED.value,
    },
    RequestStatus.OPENED.value: {
        RequestStatus.COMPLETED.value,
        RequestStatus.EXPIRED.value,
    },
    RequestStatus.COMPLETED.value: set(),
    RequestStatus.EXPIRED.value: set(),
}


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Database:
    """
    SQLite database for Review Compass.

    Usage:
        db = Database()
        db.init()

        client_id = db.add_client(name="Jess", email="jess@example.com")
        db.add_review_request(client_id, "google", request_url="https://...")
        db.update_request_status(1, "opened")
    """

    def __init__(self, db_path: str = DATABASE_FILE):
        self.db_path = str(db_path)

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def init(self):
        """Initialize database tables."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS clients (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    email TEXT DEFAULT '',
                    phone TEXT DEFAULT '',
                    created_at TEXT NOT NULL
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS review_requests (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    client_id INTEGER NOT NULL REFERENCES clients(id),
                    client_name TEXT DEFAULT '',
                    client_email TEXT DEFAULT '',
                    platform TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'sent',
                    sent_at TEXT NOT NULL,
                    request_url TEXT DEFAULT '',
                    custom_message TEXT
                )
            """)

            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_review_requests_client ON review_requests(client_id)"
            )

            logger.info(f"Database initialized: {self.db_path}")

    # ── Client CRUD ───────────────────────────────────────────────

    def add_client(self, name: str, email: str = "", phone: str = "") -> int:
        """Add a new client and return its id."""
        with self._get_connection() as conn:
            cursor = conn.execute(
                "INSERT INTO clients (name, email, phone, created_at) VALUES (?, ?, ?, ?)",
                (name, email, phone, _utc_now())
            )
            return cursor.lastrowid

    def bulk_add_clients(self, clients: list) -> dict:
        """
        Add multiple clients at once.

        Args:
            clients: List of dicts with 'name', 'email', 'phone' keys

        Returns:
            Dict with 'added' count and 'errors' list
        """
        result = {'added': 0, 'errors': []}

        with self._get_connection() as conn:
            for client in clients:
                name = (client.get('name') or '').strip()
                email = (client.get('email') or '').strip()
                phone = (client.get('phone') or '').strip()

                if not name:
                    result['errors'].append(f"Missing name: {client}")
                    continue

                conn.execute(
                    "INSERT INTO clients (name, email, phone, created_at) VALUES (?, ?, ?, ?)",
                    (name, email, phone, _utc_now())
                )
                result['added'] += 1

        logger.info(f"Bulk import: {result['added']} added, {len(result['errors'])} rejected")
        return result

    def get_all_clients(self) -> List[Client]:
        with self._get_connection() as conn:
            rows = conn.execute("SELECT * FROM clients ORDER BY id").fetchall()
            return [self._row_to_client(row) for row in rows]

    def get_client(self, client_id: int) -> Optional[Client]:
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM clients WHERE id = ?", (client_id,)).fetchone()
            return self._row_to_client(row) if row else None

    # ── Review Requests ───────────────────────────────────────────

    def add_review_request(
        self,
        client_id: int,
        platform: str,
        request_url: str = "",
        custom_message: Optional[str] = None,
        client_name: str = "",
        client_email: str = "",
    ) -> ReviewRequest:
        """Record a new request with status 'sent'."""
        sent_at = _utc_now()
        with self._get_connection() as conn:
            cursor = conn.execute(
                """INSERT INTO review_requests
                   (client_id, client_name, client_email, platform, status, sent_at, request_url, custom_message)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (client_id, client_name, client_email, platform,
                 RequestStatus.SENT.value, sent_at, request_url, custom_message)
            )
            request_id = cursor.lastrowid

        logger.info(f"Review request {request_id} stored for client {client_id} on {platform}")
        return ReviewRequest(
            id=request_id,
            client_id=client_id,
            platform=platform,
            status=RequestStatus.SENT.value,
            sent_at=sent_at,
            request_url=request_url,
            client_name=client_name,
            client_email=client_email,
            custom_message=custom_message,
        )

    def get_all_review_requests(self, client_id: Optional[int] = None) -> List[ReviewRequest]:
        """Get all review requests, optionally for one client."""
        with self._get_connection() as conn:
            if client_id is not None:
                rows = conn.execute(
                    "SELECT * FROM review_requests WHERE client_id = ? ORDER BY id", (client_id,)
                ).fetchall()
            else:
                rows = conn.execute("SELECT * FROM review_requests ORDER BY id").fetchall()
            return [self._row_to_request(row) for row in rows]

    def get_review_request(self, request_id: int) -> Optional[ReviewRequest]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM review_requests WHERE id = ?", (request_id,)
            ).fetchone()
            return self._row_to_request(row) if row else None

    def update_request_status(self, request_id: int, status: str) -> Optional[ReviewRequest]:
        """
        Move a request along sent -> opened -> completed | expired.

        Returns None if the request does not exist.
        Raises InvalidStatusTransition for anything else.
        """
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM review_requests WHERE id = ?", (request_id,)
            ).fetchone()
            if row is None:
                return None

            current = row["status"]
            if status not in STATUS_TRANSITIONS.get(current, set()):
                raise InvalidStatusTransition(current, status)

            conn.execute(
                "UPDATE review_requests SET status = ? WHERE id = ?",
                (status, request_id)
            )

        logger.info(f"Review request {request_id}: {current} -> {status}")
        updated = self._row_to_request(row)
        updated.status = status
        return updated

    # ── Row mapping ───────────────────────────────────────────────

    def _row_to_client(self, row: sqlite3.Row) -> Client:
        return Client(
            id=row["id"],
            name=row["name"],
            email=row["email"] or "",
            phone=row["phone"] or "",
            created_at=row["created_at"] or "",
        )

    def _row_to_request(self, row: sqlite3.Row) -> ReviewRequest:
        return ReviewRequest(
            id=row["id"],
            client_id=row["client_id"],
            platform=row["platform"],
            status=row["status"],
            sent_at=row["sent_at"] or "",
            request_url=row["request_url"] or "",
            client_name=row["client_name"] or "",
            client_email=row["client_email"] or "",
            custom_message=row["custom_message"],
        )


def init_database(db_path: str = DATABASE_FILE) -> Database:
    """Create a Database and make sure its tables exist."""
    db = Database(db_path)
    db.init()
    return db
