import pytest

from pc65.definitions import MAX_NESTING_LEVEL, DefnKey, RoutineKey, TypeForm
from pc65.symtab import (
    ErrorCode,
    NestingTooDeepError,
    Scope,
    SymbolTable,
    search_symtab,
)


def test_search_empty_tree():
    assert search_symtab("x", None) is None


def test_scope_enter_and_search():
    scope = Scope()
    node = scope.enter("alpha", 3)
    scope.enter("beta")
    assert scope.search("alpha") is node
    assert node.level == 3
    assert scope.search("gamma") is None
    assert "beta" in scope
    assert "gamma" not in scope


def test_scope_iterates_in_name_order():
    scope = Scope()
    names = ["m", "c", "x", "a", "q", "d"]
    for name in names:
        scope.enter(name)
    assert [n.name for n in scope] == sorted(names)
    assert len(scope) == len(names)


def test_duplicate_goes_right_and_first_is_found():
    scope = Scope()
    first = scope.enter("k")
    second = scope.enter("k")
    assert first.right is second
    assert scope.search("k") is first


def test_search_symtab_matches_scope_search():
    scope = Scope()
    for name in ["b", "a", "c"]:
        scope.enter(name)
    assert search_symtab("c", scope.root) is scope.search("c")


def test_predefined_types():
    table = SymbolTable()
    integer = table.search_local("integer")
    assert integer.defn.key == DefnKey.TYPE
    assert integer.type is table.integer_type
    assert table.integer_type.form == TypeForm.SCALAR
    assert table.integer_type.type_idp is integer
    assert table.char_type.size == 1
    assert table.boolean_type.form == TypeForm.ENUM
    assert table.boolean_type.max_value == 1


def test_boolean_constants_chain():
    table = SymbolTable()
    false_idp = table.boolean_type.const_idp
    assert false_idp.name == "false"
    chain = list(false_idp.chain())
    assert [n.name for n in chain] == ["false", "true"]
    assert [n.defn.value for n in chain] == [0, 1]
    assert all(n.defn.key == DefnKey.CONST for n in chain)
    assert all(n.type is table.boolean_type for n in chain)


@pytest.mark.parametrize(
    "name, routine_key, defn_key",
    [
        ("read", RoutineKey.READ, DefnKey.PROC),
        ("writeln", RoutineKey.WRITELN, DefnKey.PROC),
        ("eof", RoutineKey.EOF, DefnKey.FUNC),
        ("trunc", RoutineKey.TRUNC, DefnKey.FUNC),
        ("sqrt", RoutineKey.SQRT, DefnKey.FUNC),
    ],
)
def test_standard_routines(name, routine_key, defn_key):
    table = SymbolTable()
    node = table.search_display(name)
    assert node.defn.key == defn_key
    assert node.defn.routine_key == routine_key
    assert node.type is None
    assert node.defn.parms is None


def test_predefined_count():
    table = SymbolTable()
    assert len(table.display[0]) == 6 + 4 + 17
    assert table.level == 0
    assert table.errors == []


def test_scopes_shadow_and_exit():
    table = SymbolTable()
    outer = table.enter_local("v")
    inner_scope = table.enter_scope()
    assert table.level == 1
    assert table.search_display("v") is outer
    assert table.search_local("v") is None
    inner = table.enter_local("v")
    assert inner.level == 1
    assert table.search_display("v") is inner
    assert table.exit_scope() is inner_scope
    assert table.level == 0
    assert table.search_display("v") is outer


def test_enter_given_scope():
    table = SymbolTable()
    existing = Scope()
    node = existing.enter("z")
    table.enter_scope(existing)
    assert table.search_local("z") is node


def test_nesting_limit():
    table = SymbolTable()
    for _ in range(MAX_NESTING_LEVEL - 1):
        table.enter_scope()
    assert table.level == MAX_NESTING_LEVEL - 1
    with pytest.raises(NestingTooDeepError):
        table.enter_scope()
    assert table.errors == [ErrorCode.NESTING_TOO_DEEP]
    assert table.level == MAX_NESTING_LEVEL - 1


def test_exit_outermost_raises():
    table = SymbolTable()
    with pytest.raises(IndexError):
        table.exit_scope()


def test_search_and_find_all_undefined():
    table = SymbolTable()
    node = table.search_and_find_all("missing")
    assert table.errors == [ErrorCode.UNDEFINED_IDENTIFIER]
    assert node.defn.key == DefnKey.UNDEFINED
    assert node.type is table.dummy_type
    assert table.search_local("missing") is node


def test_search_and_find_all_found():
    table = SymbolTable()
    node = table.search_and_find_all("integer")
    assert node.type is table.integer_type
    assert table.errors == []


def test_search_and_enter_local_redefinition():
    table = SymbolTable()
    table.enter_scope()
    first = table.search_and_enter_local("x")
    assert table.errors == []
    again = table.search_and_enter_local("x")
    assert again is first
    assert table.errors == [ErrorCode.REDEFINED_IDENTIFIER]


def test_search_and_enter_this_scope():
    table = SymbolTable()
    fields = Scope()
    node = table.search_and_enter("f", fields)
    assert fields.search("f") is node
    assert table.search_local("f") is None
    assert table.search_and_enter("f", fields) is node
    assert table.errors == [ErrorCode.REDEFINED_IDENTIFIER]


def test_enter_standard_routine_in_local_scope():
    table = SymbolTable()
    table.enter_scope()
    node = table.enter_standard_routine("myproc", RoutineKey.DECLARED, DefnKey.PROC)
    assert table.search_local("myproc") is node
    assert node.defn.key == DefnKey.PROC
    assert node.level == 1