from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from pitico_app.config import settings
from pitico_app.exceptions import AliasNotFound, RegistrationConflict
from pitico_app.logging_config import get_logger
from pitico_app.models.url import UrlRecord
from pitico_app.services.encoder import encode, is_canonical_alias
from pitico_app.storage.mapping_store import MappingStore

logger = get_logger(__name__)


@dataclass
class RegistrationResult:
    """Outcome of a registration: the stored record and whether this call created it"""
    record: UrlRecord
    created: bool

    @property
    def alias(self) -> str:
        return self.record.alias


class URLService:
    """
    Registration and resolution of aliases.
    
    The store is built from the request's database session, so the service
    is as cheap to create as the session itself.
    """
    
    def __init__(
        self,
        db: Session,
        max_retries: Optional[int] = None,
        redirect_scheme: Optional[str] = None,
    ):
        """
        Args:
            db: Database session
            max_retries: Registration attempts before giving up on an
                identifier race (defaults to settings)
            redirect_scheme: Scheme prefixed to resolved URLs (defaults to settings)
        """
        self.store = MappingStore(db)
        self.max_retries = max_retries if max_retries is not None else settings.registration_max_retries
        self.redirect_scheme = redirect_scheme if redirect_scheme is not None else settings.redirect_scheme
    
    def register(self, original_url: str) -> RegistrationResult:
        """
        Register a URL, returning the existing alias when already known.
        
        Process:
        1. Look the URL up; if stored, return its record
        2. Allocate the next identifier and encode it
        3. Conditionally insert the new record
        4. If the insert was skipped, someone else took the identifier (or
           registered the same URL first): start over from step 1
        
        Raises:
            RegistrationConflict: if every attempt lost an identifier race
            StorageError: on database failure
        """
        for attempt in range(1, self.max_retries + 1):
            existing = self.store.find_by_original_url(original_url)
            if existing is not None:
                return RegistrationResult(record=existing, created=False)
            
            url_id = self.store.next_identifier()
            record = UrlRecord(id=url_id, alias=encode(url_id), original_url=original_url)
            
            if self.store.insert(record):
                logger.info("Registered %s under %s", original_url, record.alias)
                return RegistrationResult(record=record, created=True)
            
            logger.warning(
                "Identifier %d was taken before %s could be stored (attempt %d/%d)",
                url_id, original_url, attempt, self.max_retries
            )
        
        raise RegistrationConflict(
            f"Could not allocate an identifier for {original_url} "
            f"after {self.max_retries} attempts"
        )
    
    def get_record(self, alias: str) -> UrlRecord:
        """
        Get the record stored under an alias.
        
        Raises:
            AliasNotFound: if nothing is stored under the alias
        """
        record = None
        if is_canonical_alias(alias):
            record = self.store.find_by_alias(alias)
        
        if record is None:
            raise AliasNotFound(alias)
        return record
    
    def resolve(self, alias: str) -> Optional[str]:
        """Original URL for an alias, or None when not registered"""
        try:
            return self.get_record(alias).original_url
        except AliasNotFound:
            return None
    
    def redirect_target(self, original_url: str) -> str:
        """Location to redirect to; the stored URL is not inspected for a scheme"""
        return f"{self.redirect_scheme}://{original_url}"
