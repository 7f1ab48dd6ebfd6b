"""
Chargeback models.

See: https://docs.mollie.com/reference/v2/chargebacks-api/get-chargeback
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from mollie_chargebacks.models.common import Amount, Link, PaginationLinks


class ChargebackLinks(BaseModel):
    self_: Optional[Link] = Field(default=None, alias="self")
    payment: Optional[Link] = None
    settlement: Optional[Link] = None
    documentation: Optional[Link] = None

    model_config = {"populate_by_name": True, "frozen": True}


class Chargeback(BaseModel):
    """A forced reversal of a payment, initiated by the cardholder's bank."""
    resource: Optional[str] = None
    id: Optional[str] = None
    amount: Optional[Amount] = None
    # Only set once the chargeback has been settled.
    settlement_amount: Optional[Amount] = Field(default=None, alias="settlementAmount")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    # None while the chargeback is still open.
    reversed_at: Optional[datetime] = Field(default=None, alias="reversedAt")
    payment_id: Optional[str] = Field(default=None, alias="paymentId")
    links: ChargebackLinks = Field(default_factory=ChargebackLinks, alias="_links")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("links", mode="before")
    @classmethod
    def empty_links_for_null(cls, v):
        return ChargebackLinks() if v is None else v

    @property
    def is_reversed(self) -> bool:
        return self.reversed_at is not None

    @property
    def is_settled(self) -> bool:
        return self.settlement_amount is not None

    def to_json(self) -> str:
        """Encode with wire names, leaving out every absent field."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ChargebackListEmbedded(BaseModel):
    chargebacks: list[Chargeback] = Field(default_factory=list)

    model_config = {"frozen": True}


class ChargebackList(BaseModel):
    """One page of chargebacks."""
    count: int = 0
    embedded: ChargebackListEmbedded = Field(default_factory=ChargebackListEmbedded, alias="_embedded")
    links: PaginationLinks = Field(default_factory=PaginationLinks, alias="_links")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("embedded", mode="before")
    @classmethod
    def empty_embedded_for_null(cls, v):
        return ChargebackListEmbedded() if v is None else v

    @field_validator("links", mode="before")
    @classmethod
    def empty_links_for_null(cls, v):
        return PaginationLinks() if v is None else v

    @property
    def chargebacks(self) -> list[Chargeback]:
        return self.embedded.chargebacks

    def has_next(self) -> bool:
        return self.links.next is not None

    def has_previous(self) -> bool:
        return self.links.previous is not None


class ChargebackOptions(BaseModel):
    """Query parameters accepted when fetching a single chargeback."""
    include: Optional[str] = None
    embed: Optional[str] = None

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str]:
        params = {"include": self.include, "embed": self.embed}
        # Sorted by parameter name.
        return {k: params[k] for k in sorted(params) if params[k]}


class ListChargebackOptions(BaseModel):
    """Query parameters accepted by the chargeback list endpoints."""
    include: Optional[str] = None
    embed: Optional[str] = None
    profile_id: Optional[str] = None

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str]:
        params = {"include": self.include, "embed": self.embed, "profileId": self.profile_id}
        # Sorted by parameter name.
        return {k: params[k] for k in sorted(params) if params[k]}
