from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from pitico_app.dependencies import get_url_service
from pitico_app.logging_config import get_logger
from pitico_app.services.url_service import URLService

router = APIRouter(tags=["redirect"])
logger = get_logger(__name__)


@router.get("/{alias}")
def redirect_to_original_url(
    alias: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the URL registered under alias.
    
    Unknown aliases are not an HTTP error: the client is sent to the
    not-found page instead. Storage failures propagate to the app-level
    error handler.
    
    Flow:
    1. Resolve the alias against the store
    2. Unknown: 303 to the not-found page, alias escaped as one path segment
    3. Known: 303 to the stored URL behind the configured scheme
    """
    original_url = url_service.resolve(alias)

    if original_url is None:
        return RedirectResponse(
            url=f"/url_not_found/{quote(alias, safe='')}",
            status_code=status.HTTP_303_SEE_OTHER
        )

    logger.info("Redirecting to: %s", original_url)
    return RedirectResponse(
        url=url_service.redirect_target(original_url),
        status_code=status.HTTP_303_SEE_OTHER
    )
