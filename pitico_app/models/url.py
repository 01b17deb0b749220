from sqlalchemy import Column, Integer, String
from pitico_app.database.connection import Base


class UrlRecord(Base):
    """
    Mapping between an identifier, its alias and the original URL.
    
    Records are written once and never updated or deleted. All three
    columns are unique, so a conflicting insert is ignored by the store.
    """
    __tablename__ = "urls"

    # Assigned by the allocator (max + 1), never by the database
    id = Column(Integer, primary_key=True, autoincrement=False)
    alias = Column(String, unique=True, nullable=False, index=True)
    original_url = Column(String, unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"UrlRecord(id={self.id!r}, alias={self.alias!r}, original_url={self.original_url!r})"
