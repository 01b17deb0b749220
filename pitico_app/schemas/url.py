from pydantic import BaseModel, Field, computed_field, ConfigDict
from pitico_app.config import settings


class URLBase(BaseModel):
    # Stored verbatim: no scheme validation or normalization
    original_url: str = Field(..., min_length=1, description="The original URL to be shortened")


class URLCreate(URLBase):
    pass


class URLResponse(URLBase):
    """Response schema built from a stored UrlRecord
    
    - from_attributes=True reads straight from the SQLAlchemy model
    - created tells whether this request registered the URL
    """
    id: int
    alias: str
    created: bool = False

    @computed_field
    @property
    def short_url(self) -> str:
        """Computed field - public link for the alias"""
        return f"{settings.base_url}/{self.alias}"

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    kind: str = Field(..., description="Error kind, e.g. alias_not_found")
    detail: str
