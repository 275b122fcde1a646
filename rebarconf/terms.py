"""Erlang term values found in rebar configuration files."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator


class Term:
    """Base class of every Erlang term."""

    __slots__ = ()

    def compare(self, other: object) -> bool:
        """Return True when *other* denotes the same term."""
        return type(self) is type(other) and self == other


def _format_g(value: float) -> str:
    """Render a float the way a shortest-form ``%g`` conversion does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(map(str, digits))
    point = len(text) + exponent
    exp = point - 1
    prefix = "-" if sign else ""

    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"

    if point <= 0:
        body = "0." + "0" * (-point) + text
    elif point >= len(text):
        body = text + "0" * (point - len(text))
    else:
        body = text[:point] + "." + text[point:]
    return prefix + body


def _same_elements(left: tuple[Term, ...], right: tuple[Term, ...]) -> bool:
    return len(left) == len(right) and all(a.compare(b) for a, b in zip(left, right))


@dataclass(frozen=True)
class Atom(Term):
    """An Erlang atom; quoting is kept for display but ignored when comparing."""

    value: str
    is_quoted: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return f"'{self.value}'" if self.is_quoted else self.value

    def compare(self, other: object) -> bool:
        return isinstance(other, Atom) and self.value == other.value


@dataclass(frozen=True)
class String(Term):
    """A double-quoted Erlang string."""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'

    def compare(self, other: object) -> bool:
        return isinstance(other, String) and self.value == other.value


@dataclass(frozen=True)
class Integer(Term):
    """An Erlang integer."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    def compare(self, other: object) -> bool:
        return isinstance(other, Integer) and self.value == other.value


@dataclass(frozen=True)
class Float(Term):
    """An Erlang float."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return _format_g(self.value)

    def compare(self, other: object) -> bool:
        return isinstance(other, Float) and self.value == other.value


@dataclass(frozen=True)
class Tuple(Term):
    """An Erlang tuple ``{a, b, ...}``."""

    elements: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self) -> str:
        return "{" + ", ".join(map(str, self.elements)) + "}"

    def __iter__(self) -> Iterator[Term]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def compare(self, other: object) -> bool:
        return isinstance(other, Tuple) and _same_elements(self.elements, other.elements)


@dataclass(frozen=True)
class List(Term):
    """An Erlang list ``[a, b, ...]``."""

    elements: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self) -> str:
        return "[" + ", ".join(map(str, self.elements)) + "]"

    def __iter__(self) -> Iterator[Term]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def compare(self, other: object) -> bool:
        return isinstance(other, List) and _same_elements(self.elements, other.elements)


TermSequence = Iterable[Term]