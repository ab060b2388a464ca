# pc65

Front-end data structures for a small Pascal compiler aimed at the M65C02A
processor core.

## Modules

- `pc65.definitions`: definition keys (`DefnKey`), standard routine keys
  (`RoutineKey`), type forms (`TypeForm`), variable uses (`Use`), and the
  records built while compiling: `Definition`, `TypeStruct` and `SymtabNode`.
  A `SymtabNode` iterates over its tree in name order, and `chain()` walks the
  nodes linked through `next`. Limits such as `MAX_NESTING_LEVEL` (16) live
  here too.
- `pc65.symtab`: `search_symtab` and `Scope`, a binary tree of nodes ordered
  by name (supports `search`, `enter`, `len`, `in` and iteration), and
  `SymbolTable`, the display of nested scopes. A new `SymbolTable` already
  holds the predefined types `integer`, `real`, `boolean` and `char`, the
  constants `false` and `true`, and the standard procedures (`read`,
  `readln`, `write`, `writeln`) and functions (`abs`, `arctan`, `chr`, `cos`,
  `eof`, `eoln`, `exp`, `ln`, `odd`, `ord`, `pred`, `round`, `sin`, `sqr`,
  `sqrt`, `succ`, `trunc`). Undefined and redefined identifiers are recorded
  as `ErrorCode` values in `SymbolTable.errors`; nesting too deep raises
  `NestingTooDeepError`, and exiting the outermost scope raises `IndexError`.
- `pc65.code`: label prefixes, runtime library routine names and stack frame
  offsets, the `Register` and `Instruction` enumerations, `format_label` and
  `LabelAllocator`.

## Installation

```
pip install .
```

## Example

```python
from pc65.symtab import Scope, SymbolTable
from pc65.definitions import DefnKey
from pc65.code import LabelAllocator, format_label

table = SymbolTable()
assert table.search_display("integer").defn.key is DefnKey.TYPE

table.enter_scope(Scope(None))
x = table.search_and_enter_local("x")   # entered at nesting level 1
assert x.level == 1
assert table.search_display("x") is x
table.exit_scope()

labels = LabelAllocator(0)
print(format_label("L", labels.next()))  # L_001
```

## What it does not do

This package has no scanner, parser or assembly emitter, and no command to
compile a Pascal program. It provides the symbol table, type records and
code-generation constants that such a compiler is built on.

## Running the tests

```
pip install .[test]
pytest
```