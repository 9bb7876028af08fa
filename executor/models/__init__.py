"""Pydantic models for routes and call templates."""

from executor.models.exchange import LegCallTemplate, WrapCall, WrapUnwrapTemplates
from executor.models.route import Leg, PriceRoute, Route
from executor.models.types import Address, Bytes, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes",
    "Uint256",
    # Route models
    "Leg",
    "PriceRoute",
    "Route",
    # Call templates
    "LegCallTemplate",
    "WrapCall",
    "WrapUnwrapTemplates",
]
