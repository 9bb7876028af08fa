"""Pydantic models for per-leg call templates and wrap/unwrap calls.

Templates are produced by the per-protocol encoders and consumed as opaque
byte strings; the builder only embeds token addresses and reads offsets.
"""

from pydantic import BaseModel, Field

from executor.flags import SpecialDex
from executor.models.types import Address, Bytes, hex_to_bytes


class LegCallTemplate(BaseModel):
    """Call template for one leg, positionally aligned with the route legs."""

    target_exchange: Address = Field(
        alias="targetExchange", description="Contract the dex call is sent to."
    )
    exchange_data: Bytes = Field(
        alias="exchangeData", description="Encoded dex call (selector + arguments)."
    )
    dex_func_has_recipient: bool = Field(
        default=True,
        alias="dexFuncHasRecipient",
        description="Whether the dex call delivers output to an explicit recipient.",
    )
    need_wrap_native: bool = Field(
        default=False,
        alias="needWrapNative",
        description="Whether the exchange only trades the wrapped native token.",
    )
    special_dex_flag: int = Field(
        default=SpecialDex.DEFAULT,
        ge=0,
        le=255,
        alias="specialDexFlag",
        description="Special invocation mode, passed through to the executor unchanged.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def exchange_data_bytes(self) -> bytes:
        """Decoded exchange call data."""
        return hex_to_bytes(self.exchange_data)


class WrapCall(BaseModel):
    """A deposit or withdraw call on the wrapped native token."""

    callee: Address
    calldata: Bytes

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def calldata_bytes(self) -> bytes:
        """Decoded call data."""
        return hex_to_bytes(self.calldata)


class WrapUnwrapTemplates(BaseModel):
    """Optional deposit/withdraw calls bridging native and wrapped native."""

    deposit: WrapCall | None = None
    withdraw: WrapCall | None = None

    model_config = {"populate_by_name": True, "frozen": True}
