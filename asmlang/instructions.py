"""Register name tables and helpers that build x86 assembly lines."""

from __future__ import annotations

_GENERAL = "abcd"

# Argument order used by the syscall macro: the four general registers, then
# the source index (listed twice), then the stack and base pointers.
_WORD_REGISTERS: tuple[str, ...] = (
    *(f"{letter}x" for letter in _GENERAL),
    "si",
    "si",
    "sp",
    "bp",
)

_BYTE_REGISTERS: tuple[str, ...] = tuple(
    f"{letter}{half}" for letter in _GENERAL for half in "lh"
)


def _widen(prefix: str, names: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(prefix + name for name in names)


REGISTERS_8086: tuple[str, ...] = _WORD_REGISTERS + _BYTE_REGISTERS
REGISTERS_I386: tuple[str, ...] = _widen("e", _WORD_REGISTERS) + REGISTERS_8086
REGISTERS_AMD64: tuple[str, ...] = _widen("r", _WORD_REGISTERS) + REGISTERS_I386

_BY_WORD_SIZE = {
    16: REGISTERS_8086,
    32: REGISTERS_I386,
    64: REGISTERS_AMD64,
}


def register_names(word_size: int) -> tuple[str, ...]:
    """Return the register names in argument order for a word size in bits."""
    try:
        return _BY_WORD_SIZE[word_size]
    except KeyError:
        raise ValueError(f"unsupported word size: {word_size}") from None


def _instruction(mnemonic: str, *operands: object, separator: str = ", ") -> str:
    if not operands:
        return mnemonic
    return mnemonic + " " + separator.join(str(op) for op in operands)


def asm_mov(source: str, destination: str) -> str:
    """Build a ``mov`` instruction."""
    return _instruction("mov", source, destination)


def asm_interrupt(value: str | int) -> str:
    """Build an ``int`` instruction."""
    return _instruction("int", value)


def asm_syscall() -> str:
    """Build a ``syscall`` instruction."""
    return _instruction("syscall")


def asm_push(operand_size: str, value: str | int) -> str:
    """Build a ``push`` instruction with an explicit operand size."""
    return _instruction("push", operand_size, value, separator=" ")


def asm_define(name: str, value: str | int) -> str:
    """Build a ``%define`` preprocessor directive."""
    return _instruction("%define", name, value, separator=" ")


def asm_sub(source: str, destination: str | int) -> str:
    """Build a ``sub`` instruction."""
    return _instruction("sub", source, destination)