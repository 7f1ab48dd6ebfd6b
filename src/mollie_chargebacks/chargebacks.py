"""
Chargebacks REST API.

See: https://docs.mollie.com/reference/v2/chargebacks-api/overview
"""

from __future__ import annotations

from typing import Optional, Union
from urllib.parse import quote, urlencode

from pydantic import ValidationError

from mollie_chargebacks.errors import DecodeError, RequestConstructionError
from mollie_chargebacks.models.chargeback import (
    Chargeback,
    ChargebackList,
    ChargebackOptions,
    ListChargebackOptions,
)
from mollie_chargebacks.transport.http import HttpClient


def _segment(name: str, value: str) -> str:
    if not value:
        raise RequestConstructionError(f"{name} is required")
    return quote(value, safe="")


def _with_query(path: str, options: Optional[Union[ChargebackOptions, ListChargebackOptions]]) -> str:
    # An options object with nothing set still yields a trailing "?".
    if options is None:
        return path
    return f"{path}?{urlencode(options.to_query())}"


class ChargebacksAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def get(
        self, payment_id: str, chargeback_id: str, options: Optional[ChargebackOptions] = None,
    ) -> Chargeback:
        """Retrieve a single chargeback. The original payment's ID is needed as well."""
        path = _with_query(
            f"payments/{_segment('payment_id', payment_id)}"
            f"/chargebacks/{_segment('chargeback_id', chargeback_id)}",
            options,
        )
        req = self._http.new_api_request("GET", path)
        res = await self._http.do(req)
        try:
            return Chargeback.model_validate_json(res.content)
        except ValidationError as e:
            raise DecodeError(f"invalid chargeback response: {e}") from e

    async def list(self, options: Optional[ListChargebackOptions] = None) -> ChargebackList:
        """List chargebacks across the account or organization."""
        return await self._list(_with_query("chargebacks", options))

    async def list_for_payment(
        self, payment_id: str, options: Optional[ListChargebackOptions] = None,
    ) -> ChargebackList:
        """List chargebacks of a single payment."""
        path = _with_query(f"payments/{_segment('payment_id', payment_id)}/chargebacks", options)
        return await self._list(path)

    async def _list(self, uri: str) -> ChargebackList:
        req = self._http.new_api_request("GET", uri)
        res = await self._http.do(req)
        try:
            return ChargebackList.model_validate_json(res.content)
        except ValidationError as e:
            raise DecodeError(f"invalid chargeback list response: {e}") from e
