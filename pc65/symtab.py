"""Symbol tables: binary name trees and the display of nested scopes."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import Optional

from pc65.definitions import (
    MAX_NESTING_LEVEL,
    DefnKey,
    RoutineKey,
    SymtabNode,
    TypeForm,
    TypeStruct,
)

INTEGER_SIZE = 2
REAL_SIZE = 4
BOOLEAN_SIZE = 2
CHAR_SIZE = 1

_STANDARD_PROCEDURES = (
    ("read", RoutineKey.READ),
    ("readln", RoutineKey.READLN),
    ("write", RoutineKey.WRITE),
    ("writeln", RoutineKey.WRITELN),
)

_STANDARD_FUNCTIONS = (
    ("abs", RoutineKey.ABS),
    ("arctan", RoutineKey.ARCTAN),
    ("chr", RoutineKey.CHR),
    ("cos", RoutineKey.COS),
    ("eof", RoutineKey.EOF),
    ("eoln", RoutineKey.EOLN),
    ("exp", RoutineKey.EXP),
    ("ln", RoutineKey.LN),
    ("odd", RoutineKey.ODD),
    ("ord", RoutineKey.ORD),
    ("pred", RoutineKey.PRED),
    ("round", RoutineKey.ROUND),
    ("sin", RoutineKey.SIN),
    ("sqr", RoutineKey.SQR),
    ("sqrt", RoutineKey.SQRT),
    ("succ", RoutineKey.SUCC),
    ("trunc", RoutineKey.TRUNC),
)


class ErrorCode(IntEnum):
    """Errors the symbol table reports."""

    UNDEFINED_IDENTIFIER = 1
    REDEFINED_IDENTIFIER = 2
    NESTING_TOO_DEEP = 3


class NestingTooDeepError(Exception):
    """Raised when scopes are nested deeper than the display allows."""

    code = ErrorCode.NESTING_TOO_DEEP


def search_symtab(name: str, root: Optional[SymtabNode]) -> Optional[SymtabNode]:
    """Return the node named ``name`` in the tree at ``root``, or None."""
    node = root
    while node is not None:
        if name == node.name:
            return node
        node = node.left if name < node.name else node.right
    return None


class Scope:
    """One symbol table: a binary tree of nodes ordered by name."""

    def __init__(self, root: Optional[SymtabNode] = None) -> None:
        self.root = root

    def search(self, name: str) -> Optional[SymtabNode]:
        """Return the node named ``name``, or None."""
        return search_symtab(name, self.root)

    def enter(self, name: str, level: int = 0) -> SymtabNode:
        """Insert a new node for ``name`` and return it.

        Duplicate names are inserted to the right of existing ones.
        """
        new_node = SymtabNode(name=name, level=level)
        if self.root is None:
            self.root = new_node
            return new_node
        node = self.root
        while True:
            if name < node.name:
                if node.left is None:
                    node.left = new_node
                    return new_node
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return new_node
                node = node.right

    def __iter__(self) -> Iterator[SymtabNode]:
        if self.root is None:
            return iter(())
        return iter(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None


class SymbolTable:
    """The display of nested scopes, with the predefined identifiers at level 0."""

    def __init__(self) -> None:
        self.display: list[Scope] = [Scope()]
        self.errors: list[ErrorCode] = []
        self.dummy_type = TypeStruct(form=TypeForm.NO_FORM, size=0)
        self._init_predefined()

    def _init_predefined(self) -> None:
        integer_idp = self.enter_local("integer")
        real_idp = self.enter_local("real")
        boolean_idp = self.enter_local("boolean")
        char_idp = self.enter_local("char")
        false_idp = self.enter_local("false")
        true_idp = self.enter_local("true")

        self.integer_type = TypeStruct(
            form=TypeForm.SCALAR, size=INTEGER_SIZE, type_idp=integer_idp
        )
        self.real_type = TypeStruct(form=TypeForm.SCALAR, size=REAL_SIZE, type_idp=real_idp)
        self.boolean_type = TypeStruct(
            form=TypeForm.ENUM,
            size=BOOLEAN_SIZE,
            type_idp=boolean_idp,
            const_idp=false_idp,
            max_value=1,
        )
        self.char_type = TypeStruct(form=TypeForm.SCALAR, size=CHAR_SIZE, type_idp=char_idp)

        for idp, typ in (
            (integer_idp, self.integer_type),
            (real_idp, self.real_type),
            (boolean_idp, self.boolean_type),
            (char_idp, self.char_type),
        ):
            idp.defn.key = DefnKey.TYPE
            idp.type = typ

        false_idp.defn.key = DefnKey.CONST
        false_idp.defn.value = 0
        false_idp.type = self.boolean_type
        false_idp.next = true_idp

        true_idp.defn.key = DefnKey.CONST
        true_idp.defn.value = 1
        true_idp.type = self.boolean_type

        for name, key in _STANDARD_PROCEDURES:
            self.enter_standard_routine(name, key, DefnKey.PROC)
        for name, key in _STANDARD_FUNCTIONS:
            self.enter_standard_routine(name, key, DefnKey.FUNC)

    @property
    def level(self) -> int:
        """The current nesting level."""
        return len(self.display) - 1

    @property
    def local_scope(self) -> Scope:
        """The scope at the current nesting level."""
        return self.display[-1]

    def search_display(self, name: str) -> Optional[SymtabNode]:
        """Search every scope from the innermost outwards."""
        for scope in reversed(self.display):
            node = scope.search(name)
            if node is not None:
                return node
        return None

    def search_local(self, name: str) -> Optional[SymtabNode]:
        """Search only the current scope."""
        return self.local_scope.search(name)

    def enter_local(self, name: str) -> SymtabNode:
        """Enter ``name`` into the current scope unconditionally."""
        return self.local_scope.enter(name, self.level)

    def search_and_find_all(self, name: str) -> SymtabNode:
        """Find ``name`` anywhere; if missing, report it and enter it locally."""
        node = self.search_display(name)
        if node is None:
            self.errors.append(ErrorCode.UNDEFINED_IDENTIFIER)
            node = self.enter_local(name)
            node.defn.key = DefnKey.UNDEFINED
            node.type = self.dummy_type
        return node

    def search_and_enter_local(self, name: str) -> SymtabNode:
        """Enter ``name`` locally, reporting a redefinition if already there."""
        return self.search_and_enter(name, self.local_scope)

    def search_and_enter(self, name: str, scope: Scope) -> SymtabNode:
        """Enter ``name`` into ``scope``, reporting a redefinition if already there."""
        node = scope.search(name)
        if node is None:
            return scope.enter(name, self.level)
        self.errors.append(ErrorCode.REDEFINED_IDENTIFIER)
        return node

    def enter_standard_routine(
        self, name: str, routine_key: RoutineKey, defn_key: DefnKey
    ) -> SymtabNode:
        """Enter a standard procedure or function into the current scope."""
        node = self.enter_local(name)
        node.defn.key = defn_key
        node.defn.routine_key = routine_key
        node.defn.parms = None
        node.defn.local_symtab = None
        node.type = None
        return node

    def enter_scope(self, scope: Optional[Scope] = None) -> Scope:
        """Push ``scope`` (a new empty one by default) as the next nesting level."""
        if self.level + 1 >= MAX_NESTING_LEVEL:
            self.errors.append(ErrorCode.NESTING_TOO_DEEP)
            raise NestingTooDeepError(
                f"nesting deeper than {MAX_NESTING_LEVEL - 1} levels"
            )
        if scope is None:
            scope = Scope()
        self.display.append(scope)
        return scope

    def exit_scope(self) -> Scope:
        """Pop the current scope and return it."""
        if len(self.display) <= 1:
            raise IndexError("cannot exit the outermost scope")
        return self.display.pop()