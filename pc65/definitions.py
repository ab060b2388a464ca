"""Core data definitions shared by the compiler: keys, types and symbol nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

FORM_FEED_CHAR = "\f"

MAX_FILE_NAME_LENGTH = 32
MAX_SOURCE_LINE_LENGTH = 256
MAX_PRINT_LINE_LENGTH = 80
MAX_LINES_PER_PAGE = 50
DATE_STRING_LENGTH = 26
MAX_TOKEN_STRING_LENGTH = MAX_SOURCE_LINE_LENGTH
MAX_CODE_BUFFER_SIZE = 4096
MAX_NESTING_LEVEL = 16

Value = Union[int, float, str, tuple[int, int], None]


class DefnKey(IntEnum):
    """How an identifier is defined."""

    UNDEFINED = 0
    CONST = 1
    TYPE = 2
    VAR = 3
    FIELD = 4
    VALPARM = 5
    VARPARM = 6
    PROG = 7
    PROC = 8
    FUNC = 9


class RoutineKey(IntEnum):
    """Which routine a procedure or function identifier names."""

    DECLARED = 0
    FORWARD = 1
    READ = 2
    READLN = 3
    WRITE = 4
    WRITELN = 5
    ABS = 6
    ARCTAN = 7
    CHR = 8
    COS = 9
    EOF = 10
    EOLN = 11
    EXP = 12
    LN = 13
    ODD = 14
    ORD = 15
    PRED = 16
    ROUND = 17
    SIN = 18
    SQR = 19
    SQRT = 20
    SUCC = 21
    TRUNC = 22


class TypeForm(IntEnum):
    """The shape of a type."""

    NO_FORM = 0
    SCALAR = 1
    ENUM = 2
    SUBRANGE = 3
    ARRAY = 4
    RECORD = 5


class Use(IntEnum):
    """How a variable reference is used."""

    EXPR = 0
    TARGET = 1
    VARPARM = 2


@dataclass(eq=False)
class Definition:
    """What an identifier stands for.

    Constants use ``value``; routines use the routine fields;
    variables, fields and parameters use ``offset`` and ``record_idp``.
    """

    key: DefnKey = DefnKey.UNDEFINED
    value: Value = None
    routine_key: RoutineKey = RoutineKey.DECLARED
    parm_count: int = 0
    total_parm_size: int = 0
    total_local_size: int = 0
    parms: Optional[SymtabNode] = field(default=None, repr=False)
    locals: Optional[SymtabNode] = field(default=None, repr=False)
    local_symtab: Optional[SymtabNode] = field(default=None, repr=False)
    code_segment: Optional[str] = field(default=None, repr=False)
    offset: int = 0
    record_idp: Optional[SymtabNode] = field(default=None, repr=False)


@dataclass(eq=False)
class TypeStruct:
    """A type description.

    Enumerations use ``const_idp`` and ``max_value``; subranges use
    ``range_type``, ``min_value`` and ``max_value``; arrays use the index
    and element fields; records use ``field_symtab``.
    """

    form: TypeForm = TypeForm.NO_FORM
    size: int = 0
    type_idp: Optional[SymtabNode] = field(default=None, repr=False)
    const_idp: Optional[SymtabNode] = field(default=None, repr=False)
    range_type: Optional[TypeStruct] = field(default=None, repr=False)
    min_value: int = 0
    max_value: int = 0
    index_type: Optional[TypeStruct] = field(default=None, repr=False)
    elmt_type: Optional[TypeStruct] = field(default=None, repr=False)
    min_index: int = 0
    max_index: int = 0
    elmt_count: int = 0
    field_symtab: Optional[SymtabNode] = field(default=None, repr=False)


@dataclass(eq=False)
class SymtabNode:
    """A node of a binary symbol tree, also chainable through ``next``."""

    name: str
    left: Optional[SymtabNode] = field(default=None, repr=False)
    right: Optional[SymtabNode] = field(default=None, repr=False)
    next: Optional[SymtabNode] = field(default=None, repr=False)
    info: object = field(default=None, repr=False)
    defn: Definition = field(default_factory=Definition)
    type: Optional[TypeStruct] = field(default=None, repr=False)
    level: int = 0
    label_index: int = 0

    def chain(self) -> Iterator[SymtabNode]:
        """Yield this node and every node reached through ``next``."""
        node: Optional[SymtabNode] = self
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[SymtabNode]:
        """Yield the nodes of the tree rooted here in name order."""
        stack: list[SymtabNode] = []
        node: Optional[SymtabNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right