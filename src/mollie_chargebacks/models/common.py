"""
Shared Mollie wire types: amounts and HAL links.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Amount(BaseModel):
    currency: str
    value: str  # decimal string as sent, e.g. "10.00"

    model_config = {"frozen": True}


class Link(BaseModel):
    href: str
    type: Optional[str] = None

    model_config = {"frozen": True}


class PaginationLinks(BaseModel):
    """``_links`` of a list response."""
    self_: Optional[Link] = Field(default=None, alias="self")
    previous: Optional[Link] = None
    next: Optional[Link] = None
    documentation: Optional[Link] = None

    model_config = {"populate_by_name": True, "frozen": True}
