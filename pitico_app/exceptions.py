"""
Error kinds raised by the core.

The core never formats transport responses itself: every error carries an
ErrorKind and the boundary layer (routes, exception handlers) decides how
to present it.
"""

from enum import Enum


class ErrorKind(Enum):
    """Explicit error taxonomy shared by the store, service and API"""
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STORAGE_ERROR = "storage_error"
    REGISTRATION_CONFLICT = "registration_conflict"
    ALIAS_NOT_FOUND = "alias_not_found"
    INVALID_ALIAS = "invalid_alias"


class PiticoError(Exception):
    """Base class for all service errors"""

    kind: ErrorKind = ErrorKind.STORAGE_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StorageUnavailable(PiticoError):
    """Backing store could not be opened or its schema created (fatal at startup)"""
    kind = ErrorKind.STORAGE_UNAVAILABLE


class StorageError(PiticoError):
    """I/O or query failure while serving a request"""
    kind = ErrorKind.STORAGE_ERROR


class RegistrationConflict(StorageError):
    """Could not reserve an identifier after repeated allocation races"""
    kind = ErrorKind.REGISTRATION_CONFLICT


class AliasNotFound(PiticoError):
    """No record is stored under the requested alias"""
    kind = ErrorKind.ALIAS_NOT_FOUND

    def __init__(self, alias: str):
        super().__init__(f"Pitico URL {alias} not found")
        self.alias = alias


class InvalidAlias(PiticoError):
    """Alias text contains symbols outside the base62 alphabet"""
    kind = ErrorKind.INVALID_ALIAS
