"""Runtime result-type descriptors.

A :class:`ResultType` is a first-class value that can decide whether an
arbitrary Python object is an instance of the type it describes. It is what a
typed evaluator checks expression results against; the check is an
assertion, never a conversion.
"""

from __future__ import annotations

import datetime
import numbers
import re
from collections.abc import Mapping, Set
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from fnexpr.exceptions import InvalidArgumentError

_CONTAINER_NAME_PATTERN = re.compile(r"^(list|set|tuple)\[(.+)\]$")


@dataclass(frozen=True)
class ResultType:
    """Describes the expected runtime type of an expression result.

    An empty ``classes`` tuple means unconstrained: every value is accepted.
    When ``element`` is set, every non-``None`` item of an accepted container
    must also be accepted by it.
    """

    name: str
    classes: tuple[type, ...] = ()
    excluded: tuple[type, ...] = ()
    element: ResultType | None = None

    @property
    def constrained(self) -> bool:
        return bool(self.classes)

    def accepts(self, value: Any) -> bool:
        """Return True when *value* is an instance of this type."""
        if not self.classes:
            return True
        if not isinstance(value, self.classes):
            return False
        if self.excluded and isinstance(value, self.excluded):
            return False
        if self.element is None:
            return True
        return all(item is None or self.element.accepts(item) for item in value)

    def __str__(self) -> str:
        return self.name


ANY = ResultType("object")
OBJECT = ANY

BOOLEAN = ResultType("boolean", (bool,))
# bool subclasses int; a boolean is not an acceptable integer result.
INTEGER = ResultType("integer", (int,), excluded=(bool,))
FLOAT = ResultType("float", (float,))
DECIMAL = ResultType("decimal", (Decimal,))
NUMBER = ResultType("number", (numbers.Number,), excluded=(bool,))
STRING = ResultType("string", (str,))
BYTES = ResultType("bytes", (bytes, bytearray))
DATE = ResultType("date", (datetime.date,))
DATETIME = ResultType("datetime", (datetime.datetime,))
LIST = ResultType("list", (list,))
TUPLE = ResultType("tuple", (tuple,))
SET = ResultType("set", (Set,))
MAPPING = ResultType("mapping", (Mapping,))

RESULT_TYPES_BY_NAME: dict[str, ResultType] = {
    t.name: t
    for t in (ANY, BOOLEAN, INTEGER, FLOAT, DECIMAL, NUMBER, STRING, BYTES, DATE, DATETIME, LIST, TUPLE, SET, MAPPING)
}
RESULT_TYPES_BY_NAME["any"] = ANY


def of(cls: type, name: str | None = None) -> ResultType:
    """Return a descriptor accepting instances of *cls* (and its subclasses)."""
    if not isinstance(cls, type):
        raise InvalidArgumentError(f"Result type must be built from a class, got {cls!r}")
    if cls is object:
        return ANY
    return ResultType(name or cls.__name__, (cls,))


def list_of(element: ResultType) -> ResultType:
    """Return a descriptor for a list whose items are all of *element*."""
    return ResultType(f"list[{element.name}]", (list,), element=element)


def set_of(element: ResultType) -> ResultType:
    """Return a descriptor for a set whose items are all of *element*."""
    return ResultType(f"set[{element.name}]", (Set,), element=element)


def tuple_of(element: ResultType) -> ResultType:
    """Return a descriptor for a tuple whose items are all of *element*."""
    return ResultType(f"tuple[{element.name}]", (tuple,), element=element)


_CONTAINER_FACTORIES = {"list": list_of, "set": set_of, "tuple": tuple_of}


def parse_type_name(name: str) -> ResultType:
    """Resolve a textual type name such as ``integer`` or ``list[string]``.

    Raises InvalidArgumentError for unknown names.
    """
    normalized = name.strip().lower()
    match = _CONTAINER_NAME_PATTERN.match(normalized)
    if match:
        return _CONTAINER_FACTORIES[match.group(1)](parse_type_name(match.group(2)))

    result_type = RESULT_TYPES_BY_NAME.get(normalized)
    if result_type is None:
        raise InvalidArgumentError(
            f"Unknown result type {name!r}; expected one of {sorted(RESULT_TYPES_BY_NAME)} "
            "or list[...], set[...], tuple[...]"
        )
    return result_type
