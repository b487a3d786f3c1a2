from pydantic import BaseModel, HttpUrl, Field, computed_field, ConfigDict
from typing import Optional
from datetime import datetime
from urlgen.config import settings


class URLBase(BaseModel):
    long_url: HttpUrl = Field(..., description="The original URL to be shortened")


class URLCreate(URLBase):
    pass


class URLResponse(URLBase):
    """Serializes a URL row (from_attributes reads the SQLAlchemy model)"""
    id: int
    short_code: str
    created_at: Optional[datetime] = None

    @computed_field
    @property
    def short_url(self) -> str:
        return f"{settings.base_url}/{self.short_code}"

    model_config = ConfigDict(from_attributes=True)
