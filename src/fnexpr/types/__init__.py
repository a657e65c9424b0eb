"""Shared type aliases and result-type descriptors for fnexpr."""

from .common import Index, Parameters
from .result import (
    ANY,
    BOOLEAN,
    BYTES,
    DATE,
    DATETIME,
    DECIMAL,
    FLOAT,
    INTEGER,
    LIST,
    MAPPING,
    NUMBER,
    OBJECT,
    SET,
    STRING,
    TUPLE,
    ResultType,
    list_of,
    of,
    parse_type_name,
    set_of,
    tuple_of,
)

__all__ = [
    "ANY",
    "BOOLEAN",
    "BYTES",
    "DATE",
    "DATETIME",
    "DECIMAL",
    "FLOAT",
    "INTEGER",
    "LIST",
    "MAPPING",
    "NUMBER",
    "OBJECT",
    "SET",
    "STRING",
    "TUPLE",
    "Index",
    "Parameters",
    "ResultType",
    "list_of",
    "of",
    "parse_type_name",
    "set_of",
    "tuple_of",
]
