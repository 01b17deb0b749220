"""
Plain-text pages: greeting, registration and the not-found display.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pitico_app.dependencies import get_url_service
from pitico_app.exceptions import StorageError
from pitico_app.services.url_service import URLService

router = APIRouter(tags=["pages"], default_response_class=PlainTextResponse)

WELCOME_TEXT = "Welcome to Pitico, your very very simple URL shortener"
REGISTER_PROMPT = "Please provide an URL to be shortened"


@router.get("/")
def welcome():
    """Static greeting"""
    return WELCOME_TEXT


@router.get("/register")
def register_prompt():
    """Shown when /register is called without a URL"""
    return REGISTER_PROMPT


@router.get("/register/{original_url:path}")
def register_url(
    original_url: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Register the rest of the path as a URL and report its alias.
    
    Flow:
    1. Empty path: show the prompt
    2. Known URL: report the alias it already has
    3. New URL: allocate an id, store it, report the new alias
    
    Storage failures are reported in the response text, not as an
    HTTP error.
    """
    if not original_url:
        return REGISTER_PROMPT

    try:
        result = url_service.register(original_url)
    except StorageError as e:
        return f"Error registering URL: {e.detail}"

    if result.created:
        return f"URL registered under: {result.alias}"
    return f'URL "{result.record.original_url}" already registered under {result.alias}'


@router.get("/url_not_found/{alias}")
def url_not_found(alias: str):
    """Target of the redirect for aliases that resolve to nothing"""
    return f"Pitico URL {alias} not found"
