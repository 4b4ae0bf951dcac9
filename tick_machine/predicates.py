"""Composable boolean predicates that guard transitions."""
from __future__ import annotations

from typing import Callable, Union

from tick_machine.types import Condition, MissingArgumentError, require


class Predicate:
    """Zero-argument boolean condition.

    Subclasses implement ``evaluate``. Predicates compose with ``&`` and
    ``|`` (or ``and_``/``or_``); both short-circuit like Python's own
    ``and``/``or``. A predicate may be evaluated every tick, so keep it cheap.
    """

    def evaluate(self) -> bool:
        raise NotImplementedError

    def and_(self, other: PredicateLike) -> AndPredicate:
        return AndPredicate(self, other)

    def or_(self, other: PredicateLike) -> OrPredicate:
        return OrPredicate(self, other)

    def __and__(self, other: PredicateLike) -> AndPredicate:
        return AndPredicate(self, other)

    def __or__(self, other: PredicateLike) -> OrPredicate:
        return OrPredicate(self, other)

    def __rand__(self, other: Condition) -> AndPredicate:
        return AndPredicate(other, self)

    def __ror__(self, other: Condition) -> OrPredicate:
        return OrPredicate(other, self)


PredicateLike = Union[Predicate, Callable[[], bool]]


class FuncPredicate(Predicate):
    """Adapts a zero-argument callable into a Predicate."""

    def __init__(self, fn: Condition) -> None:
        require(fn, "fn")
        if not callable(fn):
            raise TypeError(f"fn must be callable, got {type(fn).__name__}")
        self._fn = fn

    @property
    def fn(self) -> Condition:
        return self._fn

    def evaluate(self) -> bool:
        return bool(self._fn())

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return f"FuncPredicate({name})"


class AndPredicate(Predicate):
    """True when both operands are. ``second`` is skipped if ``first`` is False."""

    def __init__(self, first: PredicateLike, second: PredicateLike) -> None:
        self._first = as_predicate(first, "first")
        self._second = as_predicate(second, "second")

    @property
    def first(self) -> Predicate:
        return self._first

    @property
    def second(self) -> Predicate:
        return self._second

    def evaluate(self) -> bool:
        return self._first.evaluate() and self._second.evaluate()

    def __repr__(self) -> str:
        return f"({self._first!r} & {self._second!r})"


class OrPredicate(Predicate):
    """True when either operand is. ``second`` is skipped if ``first`` is True."""

    def __init__(self, first: PredicateLike, second: PredicateLike) -> None:
        self._first = as_predicate(first, "first")
        self._second = as_predicate(second, "second")

    @property
    def first(self) -> Predicate:
        return self._first

    @property
    def second(self) -> Predicate:
        return self._second

    def evaluate(self) -> bool:
        return self._first.evaluate() or self._second.evaluate()

    def __repr__(self) -> str:
        return f"({self._first!r} | {self._second!r})"


def as_predicate(condition: PredicateLike | None, name: str = "predicate") -> Predicate:
    """Return ``condition`` as a Predicate, wrapping plain callables.

    Raises MissingArgumentError for None and TypeError for anything that is
    neither a Predicate nor callable.
    """
    if condition is None:
        raise MissingArgumentError(name)
    if isinstance(condition, Predicate):
        return condition
    if callable(condition):
        return FuncPredicate(condition)
    raise TypeError(
        f"{name} must be a Predicate or a zero-argument callable, "
        f"got {type(condition).__name__}"
    )
