"""Data models for calcdemo.

Number, Operand, Variant, BuildConfig — the typed structures that flow through
build → __main__.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Number(IntEnum):
    """Named constants that can stand in for the literal operands."""

    EIGHT = 8
    SEVEN = 7

    @property
    def display(self) -> str:
        return str(self.value)


class Variant(str, Enum):
    """Output behaviours selectable at build time."""

    HELLO = "hello"
    BYE = "bye"
    DEFAULT = "default"


@dataclass(frozen=True)
class Operand:
    """An integer together with the text shown for it in output lines."""

    value: int
    symbol: str

    @classmethod
    def of(cls, source: Union[int, Number]) -> Operand:
        """Build an operand from a literal int or a named constant."""
        if isinstance(source, Number):
            return cls(value=int(source), symbol=source.display)
        return cls(value=source, symbol=str(source))


@dataclass(frozen=True)
class BuildConfig:
    """Build switches, resolved once per process."""

    variant: Variant = Variant.DEFAULT
    named_constants: bool = False
