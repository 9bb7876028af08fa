"""Bytecode builder for Executor03.

Executor03 runs a simple swap (a single leg taking 100% of the path) or a
horizontal multi-swap (several parallel legs, each with fixed amounts). Each
leg is compiled into approval, optional wrap, the dex call and, for the last
leg, the clean-up calls, and then framed with its metadata header.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from executor.calldata import CallDataBuilder
from executor.config import DEFAULT_CONFIG, ExecutorConfig
from executor.constants import MAX_UINT, Executors
from executor.errors import EmptyRouteError, MisalignedTemplatesError, MissingWrapTemplateError
from executor.flags import Flag, LegFlags
from executor.framing import add_metadata, frame_payload
from executor.models.exchange import LegCallTemplate, WrapUnwrapTemplates
from executor.models.route import Leg, PriceRoute
from executor.models.types import normalize_address
from executor.offsets import add_token_address_to_call_data, resolve_dex_offsets

logger = structlog.get_logger()

# Tolerated drift of the leg percentage sum away from 100
PERCENT_SUM_TOLERANCE = 0.01


@dataclass(frozen=True)
class OrderedLeg:
    """A leg travelling together with its call template and flags."""

    leg: Leg
    template: LegCallTemplate
    flags: LegFlags


class Executor03BytecodeBuilder:
    """Builds Executor03 payloads.

    Args:
        config: Network addresses. Defaults to mainnet.
        calldata: Shared call helpers. Built from ``config`` when omitted.
    """

    executor = Executors.THREE

    def __init__(
        self,
        config: ExecutorConfig = DEFAULT_CONFIG,
        calldata: CallDataBuilder | None = None,
    ) -> None:
        self.config = config
        self.calldata = calldata if calldata is not None else CallDataBuilder(config)

    def get_address(self) -> str:
        return self.config.executor_address(self.executor)

    # --- Flags ---

    def build_simple_swap_flags(
        self,
        leg: Leg,
        template: LegCallTemplate,
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> LegFlags:
        """Flags for the only leg of a simple swap.

        The approve flag is always ZERO.
        """
        is_native_src = self.config.is_native(leg.src_token)
        is_native_dest = self.config.is_native(leg.dest_token)

        has_deposit = weth_call_data is not None and weth_call_data.deposit is not None
        has_withdraw = weth_call_data is not None and weth_call_data.withdraw is not None
        need_wrap = template.need_wrap_native and is_native_src and has_deposit
        need_unwrap = template.need_wrap_native and is_native_dest and has_withdraw

        dex_flag = Flag.ZERO  # 0 % 4 = 0: don't insert amount, 0 % 3 = 0: no balance check
        if is_native_src and not need_wrap:
            dex_flag = Flag.FIVE  # 5 % 4 = 1: send native, 5 % 3 = 2: check destToken balance
        elif is_native_dest and not need_unwrap:
            dex_flag = Flag.FOUR  # 4 % 4 = 0: don't insert amount, 4 % 3 = 1: check native balance
        elif not template.dex_func_has_recipient or (is_native_dest and need_unwrap):
            dex_flag = Flag.EIGHT  # 8 % 4 = 0: don't insert amount, 8 % 3 = 2: check destToken balance

        return LegFlags(dex=dex_flag, approve=Flag.ZERO)

    def build_multi_swap_flags(
        self,
        leg: Leg,
        template: LegCallTemplate,
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> LegFlags:
        """Flags for a leg of a horizontal multi-swap.

        Every leg carries its literal amounts, so no patching or balance check.
        """
        _ = (leg, template, weth_call_data)
        return LegFlags(dex=Flag.ZERO, approve=Flag.ZERO)

    def build_flags(
        self,
        legs: list[Leg],
        templates: list[LegCallTemplate],
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> list[LegFlags]:
        """One flag pair per leg, in input order."""
        classify = self.build_simple_swap_flags if len(legs) == 1 else self.build_multi_swap_flags
        return [
            classify(leg, template, weth_call_data)
            for leg, template in zip(legs, templates, strict=True)
        ]

    # --- Ordering ---

    @staticmethod
    def order_legs(
        legs: list[Leg],
        templates: list[LegCallTemplate],
        flags: list[LegFlags],
    ) -> list[OrderedLeg]:
        """Move legs that need wrapping behind all others, keeping relative order.

        Legs run in parallel, so the order is free; the wrap leg goes last so
        it can withdraw wrapped native dust after every other leg has run.
        """
        ordered = [
            OrderedLeg(leg=leg, template=template, flags=leg_flags)
            for leg, template, leg_flags in zip(legs, templates, flags, strict=True)
        ]
        no_wrap = [o for o in ordered if not o.template.need_wrap_native]
        wrap = [o for o in ordered if o.template.need_wrap_native]
        return no_wrap + wrap

    # --- Leg assembly ---

    def build_dex_call_data(self, leg: Leg, template: LegCallTemplate, flag: Flag) -> bytes:
        """Embed the leg tokens into the template and frame the dex call.

        Raises:
            PatternNotFoundError: If a patch point required by the flag is missing
        """
        exchange_data = template.exchange_data_bytes
        exchange_data = add_token_address_to_call_data(exchange_data, leg.src_token)
        exchange_data = add_token_address_to_call_data(exchange_data, leg.dest_token)

        # Native output is checked on the wrapped token the exchange actually returns
        balance_token = (
            self.config.wrapped_native_token_address
            if self.config.is_native(leg.dest_token)
            else leg.dest_token
        )
        offsets = resolve_dex_offsets(
            exchange_data,
            flag,
            balance_token,
            leg.src_amount_int,
            leg.dest_amount_int,
        )

        return self.calldata.build_call_data(
            template.target_exchange,
            exchange_data,
            offsets.from_amount_pos,
            offsets.balance_check_pos,
            template.special_dex_flag,
            flag,
            offsets.to_amount_pos,
        )

    def build_leg_call_data(
        self,
        ordered: list[OrderedLeg],
        position: int,
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> bytes:
        """Assemble and frame the leg at ``position`` of the ordered legs."""
        current = ordered[position]
        leg, template, flags = current.leg, current.template, current.flags
        is_native_src = self.config.is_native(leg.src_token)
        is_native_dest = self.config.is_native(leg.dest_token)
        wrapped_native = self.config.wrapped_native_token_address

        call_data = self.build_dex_call_data(leg, template, flags.dex)

        # Native sources need no allowance; a wrapping leg gets its approval with the deposit
        if flags.dex % 4 != 1 and not is_native_src:
            approve_call_data = self.calldata.build_approve_call_data(
                template.target_exchange, leg.src_token, MAX_UINT, flags.approve
            )
            call_data = approve_call_data + call_data

        # Only the first leg that needs wrapping performs the deposit
        wrap_position = next(
            (i for i, o in enumerate(ordered) if o.template.need_wrap_native), None
        )
        deposit = weth_call_data.deposit if weth_call_data is not None else None
        if deposit is not None and wrap_position == position:
            approve_weth_call_data = self.calldata.build_approve_call_data(
                template.target_exchange, wrapped_native, MAX_UINT, flags.approve
            )
            deposit_call_data = self.calldata.build_wrap_call_data(deposit, Flag.NINE)
            call_data = approve_weth_call_data + deposit_call_data + call_data

        if position == len(ordered) - 1:
            call_data += self._build_tail_call_data(ordered, current, weth_call_data)

        need_withdraw = (
            any(o.template.need_wrap_native for o in ordered) and is_native_src
        )
        framed = add_metadata(
            call_data,
            leg.percent,
            leg.src_token,
            leg.dest_token,
            need_withdraw,
        )

        logger.debug(
            "leg_assembled",
            position=position,
            target=template.target_exchange,
            dex_flag=int(flags.dex),
            percent=leg.percent,
            need_withdraw=need_withdraw,
            call_data_size=len(call_data),
            is_native_dest=is_native_dest,
        )
        return framed

    def _build_tail_call_data(
        self,
        ordered: list[OrderedLeg],
        last: OrderedLeg,
        weth_call_data: WrapUnwrapTemplates | None,
    ) -> bytes:
        """Clean-up calls appended after the last leg."""
        tail = b""
        dest_token = last.leg.dest_token
        is_native_dest = self.config.is_native(dest_token)

        # Some dex sent its output to the executor: forward what is left
        if any(not o.template.dex_func_has_recipient for o in ordered) and not is_native_dest:
            tail += self.calldata.build_transfer_call_data(dest_token)

        withdraw = weth_call_data.withdraw if weth_call_data is not None else None
        unwrapped = False
        if is_native_dest and withdraw is not None:
            tail += self.calldata.build_unwrap_call_data(withdraw)
            unwrapped = True

        if is_native_dest and (not last.template.dex_func_has_recipient or unwrapped):
            tail += self.calldata.build_final_special_flag_call_data()

        return tail

    # --- Orchestration ---

    def _check_preconditions(
        self,
        price_route: PriceRoute,
        legs: list[Leg],
        exchange_params: list[LegCallTemplate],
        weth_call_data: WrapUnwrapTemplates | None,
    ) -> None:
        if not price_route.best_route or not legs:
            raise EmptyRouteError("Price route has no legs to compile")

        if len(exchange_params) != len(legs):
            raise MisalignedTemplatesError(
                f"Got {len(exchange_params)} call templates for {len(legs)} legs"
            )

        total_percent = price_route.best_route[0].total_percent
        if abs(total_percent - 100) > PERCENT_SUM_TOLERANCE:
            logger.warning(
                "leg_percentages_not_100",
                total_percent=total_percent,
                leg_count=len(legs),
            )

        wrap_index = next(
            (i for i, p in enumerate(exchange_params) if p.need_wrap_native), None
        )
        if wrap_index is None or not self.config.is_native(legs[wrap_index].src_token):
            return
        if weth_call_data is None or weth_call_data.deposit is None:
            raise MissingWrapTemplateError(
                f"Leg {wrap_index} needs wrapping native but no deposit call was given"
            )

    def build_bytecode(
        self,
        price_route: PriceRoute,
        exchange_params: list[LegCallTemplate],
        sender: str,
        weth_call_data: WrapUnwrapTemplates | None = None,
    ) -> bytes:
        """Compile the first best route into the Executor03 payload.

        Layout:
            [32B offset = 32][32B length = len(body) + 96][body]
            body = leg frames, wrap leg last

        Raises:
            PreconditionError: Empty route, misaligned templates or missing deposit call
            CallDataEncodingError: A template lacks an expected token or amount
            HeaderOverflowError: A header field overflowed
        """
        legs = price_route.legs
        self._check_preconditions(price_route, legs, exchange_params, weth_call_data)

        flags = self.build_flags(legs, exchange_params, weth_call_data)
        ordered = self.order_legs(legs, exchange_params, flags)

        body = b"".join(
            self.build_leg_call_data(ordered, position, weth_call_data)
            for position in range(len(ordered))
        )
        payload = frame_payload(body)

        logger.info(
            "bytecode_built",
            executor=self.executor.value,
            sender=normalize_address(sender),
            leg_count=len(ordered),
            wrap_leg_count=sum(1 for o in ordered if o.template.need_wrap_native),
            body_size=len(body),
            payload_size=len(payload),
        )
        return payload


__all__ = ["Executor03BytecodeBuilder", "OrderedLeg"]
