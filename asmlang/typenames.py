"""Type names known to the language and their numeric codes."""

from __future__ import annotations

TYPE_NAMES = frozenset(
    {
        "uint8_t",
        "uint16_t",
        "uint32_t",
        "uint64_t",
        "int8_t",
        "int16_t",
        "int32_t",
        "int64_t",
        "string",
        "char",
        "float",
        "bool",
    }
)

_UINT_MASK = 0xFFFFFFFF


def typename_to_int(name: str | bytes) -> int:
    """Sum the signed byte values of a type name into an unsigned 32-bit code."""
    data = name.encode() if isinstance(name, str) else bytes(name)
    total = sum(b - 256 if b >= 128 else b for b in data)
    return total & _UINT_MASK


def is_type_data(name: str | bytes | None) -> bool:
    """Tell whether a name is one of the built-in data type names."""
    if name is None:
        return False
    if isinstance(name, bytes):
        name = name.decode(errors="replace")
    return name in TYPE_NAMES