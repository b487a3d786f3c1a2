"""
SQLAlchemy-backed Store for short code -> long URL mappings.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from urlgen.models.url import URL


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the store fails to write a mapping"""


class URLStore:
    """
    Store over the ``urls`` table.

    get()/put() give the service a plain key/value view (short code ->
    long URL); the row methods cover the lookups and two-step inserts the
    service needs for code generation.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_row(self, url: str, is_short_url: bool) -> Optional[URL]:
        """Find a row by short code (is_short_url=True) or by long URL"""
        column = URL.short_code if is_short_url else URL.long_url
        return self.db.query(URL).filter(column == url).first()

    def reserve_row(self, long_url: str) -> URL:
        """
        Insert a row without a short code and flush it to get its ID.
        Nothing is committed until save_short_url().
        """
        row = URL(long_url=long_url, short_code=None)
        try:
            self.db.add(row)
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Could not reserve row for {long_url!r}") from e
        return row

    def save_short_url(self, row: URL) -> URL:
        """Insert or update ``row`` and commit"""
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to save short code %r: %s", row.short_code, e)
            raise StoreError(f"Could not save short code {row.short_code!r}") from e
        self.db.refresh(row)
        return row

    def get(self, key: str) -> Tuple[str, bool]:
        """Return (long_url, True) for a stored short code, else ("", False)"""
        row = self.get_row(key, is_short_url=True)
        if row is None:
            return "", False
        return row.long_url, True

    def put(self, key: str, value: str) -> None:
        """Store short code ``key`` for long URL ``value``"""
        self.save_short_url(URL(long_url=value, short_code=key))

    def delete(self, key: str) -> bool:
        """Delete the row for short code ``key``. Returns False if there was none."""
        row = self.get_row(key, is_short_url=True)
        if row is None:
            return False
        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Could not delete short code {key!r}") from e
        return True

    def rollback(self) -> None:
        """Discard uncommitted changes, e.g. a reserved row"""
        self.db.rollback()

    def close(self) -> None:
        self.db.close()
