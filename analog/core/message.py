"""
Message parts

A log call carries an ordered sequence of parts. A part is either a
literal value or a deferred zero-argument callable whose result is only
computed once the logger has accepted the event.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Tuple, Union


@dataclass(frozen=True)
class LiteralPart:
    """A message part that is already a value."""

    value: Any

    def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class DeferredPart:
    """A message part computed on demand by calling ``factory``."""

    factory: Callable[[], Any]

    def __post_init__(self):
        if not callable(self.factory):
            raise TypeError("factory must be callable")

    def resolve(self) -> Any:
        return self.factory()


Part = Union[LiteralPart, DeferredPart]


def as_part(value: Any) -> Part:
    """
    Wrap a raw value as a message part.

    Functions, lambdas and bound methods become DeferredPart. Classes are
    callable too but are logged as literals.
    """
    if isinstance(value, (LiteralPart, DeferredPart)):
        return value
    if callable(value) and not inspect.isclass(value):
        return DeferredPart(value)
    return LiteralPart(value)


def materialize(parts: Iterable[Any]) -> Tuple[Any, ...]:
    """Resolve every part exactly once, preserving order."""
    return tuple(as_part(part).resolve() for part in parts)
