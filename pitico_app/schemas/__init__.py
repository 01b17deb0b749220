from .url import URLCreate, URLResponse, ErrorResponse

__all__ = ["URLCreate", "URLResponse", "ErrorResponse"]
