"""Request and response models for the HTTP and CLI surfaces."""

from pydantic import BaseModel, Field

from executor.constants import Executors
from executor.models.exchange import LegCallTemplate, WrapUnwrapTemplates
from executor.models.route import PriceRoute
from executor.models.types import Address, Bytes


class BuildRequest(BaseModel):
    """Everything needed to compile one executor payload."""

    price_route: PriceRoute = Field(alias="priceRoute")
    exchange_params: list[LegCallTemplate] = Field(
        alias="exchangeParams",
        description="Call templates, one per leg of the first best route, same order.",
    )
    sender: Address = Field(description="Caller of the router; not embedded by the builder.")
    weth_call_data: WrapUnwrapTemplates | None = Field(default=None, alias="wethCallData")
    executor: Executors = Executors.THREE

    model_config = {"populate_by_name": True}


class BuildResponse(BaseModel):
    """Compiled executor payload."""

    bytecode: Bytes
    executor: Executors
    executor_address: Address = Field(alias="executorAddress")

    model_config = {"populate_by_name": True}
