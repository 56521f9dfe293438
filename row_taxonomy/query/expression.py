"""Composite SQL predicate expressions.

A composite joins its parts with a single logical combinator. Filters keep
their predicate in one of these so that it can be swapped for an equivalent
expression (e.g. one targeting a joined table) without touching parameters.
"""

from __future__ import annotations

from collections.abc import Iterable


class CompositeExpression:
    """A list of predicates joined by AND or OR."""

    TYPE_AND = "AND"
    TYPE_OR = "OR"

    def __init__(self, type: str, parts: Iterable[CompositeExpression | str] = ()) -> None:  # noqa: A002
        self._type = type
        self._parts: list[CompositeExpression | str] = []
        for part in parts:
            self.add(part)

    @property
    def type(self) -> str:
        return self._type

    @property
    def parts(self) -> tuple[CompositeExpression | str, ...]:
        return tuple(self._parts)

    def add(self, part: CompositeExpression | str) -> CompositeExpression:
        """Append a predicate; empty strings and empty composites are ignored."""
        if isinstance(part, CompositeExpression) and len(part) == 0:
            return self
        if not part:
            return self
        self._parts.append(part)
        return self

    def __len__(self) -> int:
        return len(self._parts)

    def __str__(self) -> str:
        if len(self._parts) == 1:
            return str(self._parts[0])
        return "(" + f") {self._type} (".join(str(p) for p in self._parts) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeExpression):
            return NotImplemented
        return self._type == other._type and self._parts == other._parts

    def __repr__(self) -> str:
        return f"CompositeExpression({self._type!r}, {self._parts!r})"


class ExpressionBuilder:
    """Factory for predicates, handed out by ``SelectQueryBuilder.expr()``."""

    def and_x(self, *parts: CompositeExpression | str) -> CompositeExpression:
        return CompositeExpression(CompositeExpression.TYPE_AND, parts)

    def or_x(self, *parts: CompositeExpression | str) -> CompositeExpression:
        return CompositeExpression(CompositeExpression.TYPE_OR, parts)

    def eq(self, x: str, y: str) -> str:
        return f"{x} = {y}"
