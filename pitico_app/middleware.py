"""Request logging middleware."""

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from pitico_app.logging_config import get_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""
    
    def __init__(self, app, logger=None):
        super().__init__(app)
        self.logger = logger or get_logger("pitico_app.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"
        
        response = await call_next(request)
        
        duration_ms = (time.time() - start_time) * 1000
        self.logger.info(
            "%s %s from %s - %d (%.2fms)",
            request.method, request.url.path, client_ip,
            response.status_code, duration_ms
        )
        return response
