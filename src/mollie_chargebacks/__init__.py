"""
mollie-chargebacks — Mollie chargebacks API client for Python.

Retrieve and list chargebacks (forced payment reversals) over the Mollie v2 REST API.
"""

from mollie_chargebacks.client import AsyncMollie, Mollie
from mollie_chargebacks.chargebacks import ChargebacksAPI
from mollie_chargebacks.errors import MollieError, RequestConstructionError, TransportError, DecodeError
from mollie_chargebacks.models.chargeback import (
    Chargeback,
    ChargebackLinks,
    ChargebackList,
    ChargebackOptions,
    ListChargebackOptions,
)
from mollie_chargebacks.models.common import Amount, Link, PaginationLinks

__version__ = "0.1.0"
__all__ = [
    "AsyncMollie",
    "Mollie",
    "ChargebacksAPI",
    "MollieError",
    "RequestConstructionError",
    "TransportError",
    "DecodeError",
    "Chargeback",
    "ChargebackLinks",
    "ChargebackList",
    "ChargebackOptions",
    "ListChargebackOptions",
    "Amount",
    "Link",
    "PaginationLinks",
]
