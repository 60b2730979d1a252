"""Data models managed by the shop panel."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """A shop customer."""

    id: int
    name: str
    email: str


class Order(BaseModel):
    """An order placed by a customer."""

    id: int
    customer_id: int
    total_cents: int = Field(ge=0)
