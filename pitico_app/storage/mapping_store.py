"""
Mapping store backed by the SQLAlchemy session.

Every lookup goes to the database; there is no caching layer. Uniqueness of
id, alias and original_url is enforced by the table constraints, and an
insert that would violate any of them is skipped instead of failing.
"""

from typing import Optional

from sqlalchemy import func, insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pitico_app.exceptions import StorageError
from pitico_app.logging_config import get_logger
from pitico_app.models.url import UrlRecord

logger = get_logger(__name__)

# Dialects with native "INSERT ... ON CONFLICT DO NOTHING"
_CONFLICT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class MappingStore:
    """
    Queries and conditional inserts over the urls table.
    
    All SQLAlchemy failures surface as StorageError; the session is rolled
    back first so it stays usable for the rest of the request.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_by_alias(self, alias: str) -> Optional[UrlRecord]:
        """Exact-match lookup by alias, None when absent"""
        return self._first(UrlRecord.alias == alias)
    
    def find_by_original_url(self, original_url: str) -> Optional[UrlRecord]:
        """Exact-match lookup by original URL, None when absent"""
        return self._first(UrlRecord.original_url == original_url)
    
    def next_identifier(self) -> int:
        """
        Next identifier to allocate: highest stored id plus one, or 1.
        
        The sequence state is the data itself; two callers reading at the
        same time get the same answer and only one of their inserts wins.
        """
        try:
            highest = self.db.query(func.max(UrlRecord.id)).scalar()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not read highest identifier: {e}") from e
        return (highest or 0) + 1
    
    def insert(self, record: UrlRecord) -> bool:
        """
        Insert the record unless it collides on id, alias or original_url.
        
        Returns:
            True if the row was written, False if an existing row made
            the insert a no-op
        
        Raises:
            StorageError: on any database failure other than the collision
        """
        values = {
            "id": record.id,
            "alias": record.alias,
            "original_url": record.original_url,
        }
        dialect = self.db.get_bind().dialect.name
        
        try:
            if dialect in _CONFLICT_INSERTS:
                inserted = self._insert_on_conflict_do_nothing(dialect, values)
            else:
                inserted = self._insert_in_savepoint(values)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not insert {record!r}: {e}") from e
        
        if inserted:
            logger.debug("Stored %r", record)
        else:
            logger.debug("Ignored conflicting insert of %r", record)
        return inserted
    
    def count(self) -> int:
        """Number of stored records (reported by the health check)"""
        try:
            return self.db.query(func.count(UrlRecord.id)).scalar()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not count records: {e}") from e
    
    def _first(self, criterion) -> Optional[UrlRecord]:
        try:
            return self.db.query(UrlRecord).filter(criterion).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Lookup failed: {e}") from e
    
    def _insert_on_conflict_do_nothing(self, dialect: str, values: dict) -> bool:
        stmt = _CONFLICT_INSERTS[dialect](UrlRecord).values(**values).on_conflict_do_nothing()
        result = self.db.execute(stmt)
        return result.rowcount == 1
    
    def _insert_in_savepoint(self, values: dict) -> bool:
        # Generic fallback: let the unique constraint reject the row and
        # roll back only the savepoint
        try:
            with self.db.begin_nested():
                self.db.execute(insert(UrlRecord).values(**values))
        except IntegrityError:
            return False
        return True
