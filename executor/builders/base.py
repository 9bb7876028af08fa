"""Protocol shared by executor bytecode builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from executor.constants import Executors
    from executor.models.exchange import LegCallTemplate, WrapUnwrapTemplates
    from executor.models.route import PriceRoute


class ExecutorBytecodeBuilder(Protocol):
    """Builds the payload for one executor contract version.

    Implementations compose a ``CallDataBuilder`` for the approval, transfer,
    wrap/unwrap and call-framing helpers, and provide their own flag
    classification and leg layout.
    """

    executor: Executors

    def get_address(self) -> str:
        """Deployed address of the executor this builder targets."""
        ...

    def build_bytecode(
        self,
        price_route: PriceRoute,
        exchange_params: list[LegCallTemplate],
        sender: str,
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> bytes:
        """Compile the first best route into the executor payload.

        Args:
            price_route: Route discovery output
            exchange_params: One call template per leg of the first best route
            sender: Caller of the router (not embedded in the payload)
            weth_call_data: Optional deposit/withdraw calls

        Returns:
            The framed payload bytes
        """
        ...


__all__ = ["ExecutorBytecodeBuilder"]
