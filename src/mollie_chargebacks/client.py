"""
AsyncMollie / Mollie — SDK clients exposing the chargebacks API.
"""

import asyncio
from typing import Any, Optional

import httpx

from mollie_chargebacks.chargebacks import ChargebacksAPI
from mollie_chargebacks.models.chargeback import (
    Chargeback,
    ChargebackList,
    ChargebackOptions,
    ListChargebackOptions,
)
from mollie_chargebacks.transport.http import DEFAULT_BASE_URL, HttpClient


class AsyncMollie:
    """Async Mollie client (primary)."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = HttpClient(base_url=base_url, api_key=api_key, timeout=timeout, transport=transport)
        self.chargebacks = ChargebacksAPI(self.http)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncMollie":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class SyncChargebacksAPI:
    """Blocking facade over ChargebacksAPI, driven by the owning client's loop."""

    def __init__(self, api: ChargebacksAPI, run: Any):
        self._api = api
        self._run = run

    def get(
        self, payment_id: str, chargeback_id: str, options: Optional[ChargebackOptions] = None,
    ) -> Chargeback:
        return self._run(self._api.get(payment_id, chargeback_id, options))

    def list(self, options: Optional[ListChargebackOptions] = None) -> ChargebackList:
        return self._run(self._api.list(options))

    def list_for_payment(
        self, payment_id: str, options: Optional[ListChargebackOptions] = None,
    ) -> ChargebackList:
        return self._run(self._api.list_for_payment(payment_id, options))


class Mollie:
    """Sync wrapper around AsyncMollie. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncMollie(**kwargs)
        self._loop = asyncio.new_event_loop()
        self.chargebacks = SyncChargebacksAPI(self._async.chargebacks, self._run)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def http(self) -> HttpClient:
        return self._async.http

    def close(self) -> None:
        if self._loop.is_closed():
            return
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "Mollie":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
