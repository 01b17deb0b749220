"""
FastAPI dependencies for dependency injection.

Routes depend on the service, the service depends on the request's
database session. Tests override get_db to point at a scratch database.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from pitico_app.database.connection import get_db
from pitico_app.services.url_service import URLService


def get_url_service(db: Session = Depends(get_db)) -> URLService:
    """Get URLService bound to the request's session"""
    return URLService(db=db)
