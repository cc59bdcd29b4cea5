"""Nodes of the abstract syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class NodeType(IntEnum):
    """Kinds of syntax tree node, in their numeric order."""

    INIT = 0
    COMPOUND = 1
    SYSCALL = 2
    FUNCTION = 3
    ASSIGNMENT = 4
    DEFINITION_TYPE = 5
    VARIABLE = 6
    STATEMENT = 7
    NOOP = 8
    VALUE = 9
    VAR = 10
    END = 11
    LABEL = 12
    FUNC = 13
    ENTRY_POINT = 14
    WORD_SIZE = 15


class ValueKind(IntEnum):
    """What a named value holds."""

    BITS8 = 0
    BITS16 = 1
    BITS32 = 2
    BITS64 = 3
    POINTER = 4
    AST_NODE = 5
    STRING = 6
    AUTO = 7

    @property
    def width(self) -> int | None:
        """Bit width for integer kinds, ``None`` for the others."""
        return {
            ValueKind.BITS8: 8,
            ValueKind.BITS16: 16,
            ValueKind.BITS32: 32,
            ValueKind.BITS64: 64,
        }.get(self)


@dataclass
class NameValue:
    """A name bound to a value: a variable, a register assignment and the like."""

    name: str | None = None
    value: Any = None
    kind: ValueKind | None = None


@dataclass
class Node:
    """A syntax tree node with its children and the data it carries."""

    type: NodeType
    name: str | None = None
    value: Node | None = None
    data_type: int = 0
    children: list[Node] = field(default_factory=list)
    values: list[NameValue] = field(default_factory=list)

    def add_child(self, child: Node) -> Node:
        """Append a child node and return it."""
        self.children.append(child)
        return child