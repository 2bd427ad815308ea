"""
repositories/requirement_repo.py
--------------------------------
Data access layer for requirements.
All SQL queries related to the `requirements` table live here.

Writes are staged on a pending transaction that the repository keeps open
until `flush()` commits it. Reads run inside that transaction when one is
open, otherwise on a freshly borrowed connection.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from exceptions import ResourceNotFoundException
from models.requirement import Requirement
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "req_id, uuid, title, description, created_at, updated_at"


class RequirementRepository:
    """Repository for CRUD operations on the requirements table."""

    def __init__(self):
        self._pending = None

    # ── READ ──────────────────────────────────────────────

    def find_by_title(self, title: str) -> Optional[Requirement]:
        """Fetch the first requirement with exactly this title, or None."""
        sql = f"SELECT {_COLUMNS} FROM requirements WHERE title = %s ORDER BY req_id LIMIT 1;"
        row = self._fetch_one(sql, (title,))
        return self._row_to_requirement(row) if row else None

    def find_by_uuid(self, uuid: str) -> Optional[Requirement]:
        """Fetch a requirement by its external identifier, or None."""
        sql = f"SELECT {_COLUMNS} FROM requirements WHERE uuid = %s;"
        row = self._fetch_one(sql, (uuid,))
        return self._row_to_requirement(row) if row else None

    def find_all(self) -> list[Requirement]:
        """Return every requirement, oldest first."""
        sql = f"SELECT {_COLUMNS} FROM requirements ORDER BY req_id ASC;"
        borrowed = self._pending is None
        conn = get_connection() if borrowed else self._pending
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_requirement(r) for r in cur.fetchall()]
        except Exception as e:
            if not borrowed:
                self._abort(f"Requirements read failed inside open transaction: {e}")
            raise
        finally:
            if borrowed:
                release_connection(conn)

    def count(self) -> int:
        row = self._fetch_one("SELECT COUNT(*) FROM requirements;", ())
        return int(row[0])

    # ── WRITE ─────────────────────────────────────────────

    def save(self, requirement: Requirement) -> Requirement:
        """
        Stage an insert (new record) or update (persisted record).

        Args:
            requirement: The entity to persist. Its `req_id` and timestamps
                are filled in from the database.

        Returns:
            The same Requirement, now carrying its database values.
        """
        if requirement.is_persisted():
            sql = """
                UPDATE requirements
                SET title = %s, description = %s, updated_at = NOW()
                WHERE req_id = %s
                RETURNING req_id, created_at, updated_at;
            """
            params = (requirement.title, requirement.description, requirement.req_id)
        else:
            sql = """
                INSERT INTO requirements (uuid, title, description)
                VALUES (%s, %s, %s)
                RETURNING req_id, created_at, updated_at;
            """
            params = (requirement.uuid, requirement.title, requirement.description)

        row = self._execute_write(sql, params, fetch=True)
        if row is None:
            # UPDATE matched nothing: the row was deleted underneath us
            self._abort(f"Requirement #{requirement.req_id} vanished before update")
            raise ResourceNotFoundException("Requirement", "req_id", requirement.req_id)
        requirement.req_id, requirement.created_at, requirement.updated_at = row
        logger.debug(f"Staged save of requirement #{requirement.req_id}")
        return requirement

    def save_and_flush(self, requirement: Requirement) -> Requirement:
        """Save and commit immediately."""
        saved = self.save(requirement)
        self.flush()
        return saved

    def delete_by_req_id(self, req_id: int) -> None:
        """Stage deletion of the requirement with this database id."""
        self._execute_write("DELETE FROM requirements WHERE req_id = %s;", (req_id,))
        logger.debug(f"Staged delete of requirement #{req_id}")

    def delete_all(self) -> None:
        """Stage deletion of every requirement."""
        self._execute_write("DELETE FROM requirements;", ())
        logger.debug("Staged delete of all requirements")

    def flush(self) -> None:
        """Commit the pending transaction, if any, and release its connection."""
        conn = self._pending
        if conn is None:
            return
        try:
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to commit requirements transaction: {e}")
            raise
        finally:
            self._pending = None
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_one(self, sql: str, params: tuple) -> Optional[tuple]:
        borrowed = self._pending is None
        conn = get_connection() if borrowed else self._pending
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchone()
        except Exception as e:
            if not borrowed:
                self._abort(f"Requirements read failed inside open transaction: {e}")
            raise
        finally:
            if borrowed:
                release_connection(conn)

    def _execute_write(self, sql: str, params: tuple, fetch: bool = False) -> Optional[tuple]:
        if self._pending is None:
            self._pending = get_connection()
        conn = self._pending
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchone() if fetch else None
        except Exception as e:
            self._abort(f"Requirements write failed: {e}")
            raise

    def _abort(self, reason: str) -> None:
        """Roll back the pending transaction and return its connection to the pool."""
        conn, self._pending = self._pending, None
        conn.rollback()
        release_connection(conn)
        logger.error(f"{reason}; transaction rolled back")

    @staticmethod
    def _row_to_requirement(row: tuple) -> Requirement:
        """Convert a database row tuple to a Requirement domain object."""
        return Requirement(
            req_id=row[0],
            uuid=row[1],
            title=row[2],
            description=row[3],
            created_at=row[4],
            updated_at=row[5],
        )
