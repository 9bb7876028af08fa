"""Executor call flags.

A flag is a small integer read by the executor contract through two residues:

    flag % 4:
        0: don't insert fromAmount
        1: send native equal to fromAmount
        2: send native equal to fromAmount + insert fromAmount
        3: insert fromAmount

    flag % 3:
        0: don't check balance after the call
        1: check native balance after the call
        2: check destToken balance after the call
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Flag(IntEnum):
    """Named flag values used by the builders."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11


class SpecialDex(IntEnum):
    """Special invocation modes understood by the executor."""

    DEFAULT = 0
    SWAP_ON_BALANCER_V2 = 1
    SEND_NATIVE = 2
    SWAP_ON_MAKER_PSM = 3
    SWAP_ON_SWAAP_V2_SINGLE = 4


class BalanceCheck(str, Enum):
    """Balance check performed by the executor after a call."""

    NONE = "none"
    NATIVE = "native"
    DEST_TOKEN = "dest_token"


def inserts_from_amount(flag: int) -> bool:
    """Whether the executor patches the source amount into the call."""
    return flag % 4 in (2, 3)


def sends_native(flag: int) -> bool:
    """Whether the executor attaches native value equal to the source amount."""
    return flag % 4 in (1, 2)


def balance_check(flag: int) -> BalanceCheck:
    """Balance check selected by ``flag % 3``."""
    residue = flag % 3
    if residue == 1:
        return BalanceCheck.NATIVE
    if residue == 2:
        return BalanceCheck.DEST_TOKEN
    return BalanceCheck.NONE


@dataclass(frozen=True)
class LegFlags:
    """Flag pair assigned to one leg."""

    dex: Flag = Flag.ZERO
    approve: Flag = Flag.ZERO


__all__ = [
    "BalanceCheck",
    "Flag",
    "LegFlags",
    "SpecialDex",
    "balance_check",
    "inserts_from_amount",
    "sends_native",
]
