"""Code generator definitions: label prefixes, library names, frame layout."""

from __future__ import annotations

from enum import IntEnum

STMT_LABEL_PREFIX = "L"
FLOAT_LABEL_PREFIX = "F"
STRING_LABEL_PREFIX = "S"

FLOAT_NEGATE = "_float_negate"
FLOAT_ADD = "_float_add"
FLOAT_SUBTRACT = "_float_subtract"
FLOAT_MULTIPLY = "_float_multiply"
FLOAT_DIVIDE = "_float_divide"
FLOAT_COMPARE = "_float_compare"
FLOAT_CONVERT = "_float_convert"

WRITE_INTEGER = "_write_integer"
WRITE_REAL = "_write_real"
WRITE_BOOLEAN = "_write_boolean"
WRITE_CHAR = "_write_char"
WRITE_STRING = "_write_string"
WRITE_LINE = "_write_line"

READ_INTEGER = "_read_integer"
READ_REAL = "_read_real"
READ_CHAR = "_read_char"
READ_LINE = "_read_line"

STD_END_OF_FILE = "_std_end_of_file"
STD_END_OF_LINE = "_std_end_of_line"

STD_ABS = "_std_abs"

STD_ARCTAN = "_std_arctan"
STD_COS = "_std_cos"
STD_EXP = "_std_exp"
STD_LN = "_std_ln"
STD_SIN = "_std_sin"
STD_SQRT = "_std_sqrt"

STD_ROUND = "_std_round"
STD_TRUNC = "_std_trunc"

PGM_BASE = 512
TOP_RAM = 16383

PROC_LOCALS_STACK_FRAME_OFFSET = 1
FUNC_LOCALS_STACK_FRAME_OFFSET = -3
PARAMETERS_STACK_FRAME_OFFSET = 7

STATIC_LINK = "STATIC_LINK"
STATIC_LINK_OFF = 5
RETURN_VALUE = "RETURN_VALUE"
RETURN_VALUE_OFF = -3
HIGH_RETURN_VALUE = "HIGH_RETURN_VALUE"
HIGH_RTN_VALUE_OFF = -1


class Register(IntEnum):
    """Machine registers."""

    AX = 0
    AH = 1
    AL = 2
    BX = 3
    BH = 4
    BL = 5
    CX = 6
    CH = 7
    CL = 8
    DX = 9
    DH = 10
    DL = 11
    CS = 12
    DS = 13
    ES = 14
    SS = 15
    SP = 16
    BP = 17
    SI = 18
    DI = 19


class Instruction(IntEnum):
    """Abstract instruction op codes."""

    MOVE = 0
    MOVE_BLOCK = 1
    LOAD_ADDRESS = 2
    EXCHANGE = 3
    COMPARE = 4
    COMPARE_STRINGS = 5
    POP = 6
    PUSH = 7
    AND_BITS = 8
    OR_BITS = 9
    XOR_BITS = 10
    NEGATE = 11
    INCREMENT = 12
    DECREMENT = 13
    ADD = 14
    SUBTRACT = 15
    MULTIPLY = 16
    DIVIDE = 17
    CLEAR_DIRECTION = 18
    CALL = 19
    RETURN = 20
    JUMP = 21
    JUMP_LT = 22
    JUMP_LE = 23
    JUMP_EQ = 24
    JUMP_NE = 25
    JUMP_GE = 26
    JUMP_GT = 27
    SIGN_EXTEND = 28


def format_label(prefix: str, index: int) -> str:
    """Return the assembly label for ``prefix`` and ``index``."""
    return f"{prefix}_{index:03d}"


class LabelAllocator:
    """Hands out increasing label indexes."""

    def __init__(self, start: int = 0) -> None:
        self._index = start

    def next(self) -> int:
        """Advance to and return a new label index."""
        self._index += 1
        return self._index

    @property
    def current(self) -> int:
        """The most recently issued index (or the start value)."""
        return self._index