"""Fuente: clientes (fidelización)."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import CreateCustomerRequest, Customer


class CustomerSource(ApiSource):
    path = "/api/customers"

    async def lookup(self, phone_number: str) -> Customer | None:
        """`None` cuando el backend no conoce el teléfono (`data: null`)."""

        raw = await self._request_json("GET", f"{self.path}/lookup", params={"phoneNumber": phone_number})
        data = unwrap(raw)
        if data is None:
            return None
        return Customer.model_validate(data)

    async def create(self, payload: CreateCustomerRequest) -> Customer:
        raw = await self._request_json(
            "POST",
            self.path,
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return Customer.model_validate(unwrap(raw) or {})
