from fastapi import APIRouter, Depends, Response, status
from pitico_app.schemas.url import ErrorResponse, URLCreate, URLResponse
from pitico_app.services.url_service import URLService
from pitico_app.dependencies import get_url_service

router = APIRouter(prefix="/urls", tags=["urls"])


@router.post(
    "/",
    response_model=URLResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_200_OK: {"model": URLResponse, "description": "URL was already registered"}},
)
def register_url(
    url_data: URLCreate,
    response: Response,
    url_service: URLService = Depends(get_url_service)
):
    """Register a URL; repeating the call returns the same alias with 200"""
    result = url_service.register(url_data.original_url)
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return URLResponse(
        id=result.record.id,
        alias=result.record.alias,
        original_url=result.record.original_url,
        created=result.created,
    )


@router.get(
    "/{alias}",
    response_model=URLResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_url_info(
    alias: str,
    url_service: URLService = Depends(get_url_service)
):
    """Get the record behind an alias (AliasNotFound is rendered as 404)"""
    return url_service.get_record(alias)
