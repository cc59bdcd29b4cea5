"""x86 flag bits and general-purpose registers with their sub-register views."""

from __future__ import annotations

from enum import IntFlag

_SUPPORTED_WIDTHS = (16, 32, 64)


class Flag(IntFlag):
    """Bits of the FLAGS, EFLAGS and RFLAGS registers."""

    CF = 1 << 0
    RESERVED1 = 1 << 1
    PF = 1 << 2
    RESERVED2 = 1 << 3
    AF = 1 << 4
    RESERVED3 = 1 << 5
    ZF = 1 << 6
    SF = 1 << 7
    TF = 1 << 8
    IF = 1 << 9
    DF = 1 << 10
    OF = 1 << 11
    IOPL1 = 1 << 12
    IOPL2 = 1 << 13
    NT = 1 << 14
    RESERVED4 = 1 << 15
    RF = 1 << 16
    VM = 1 << 17
    AC = 1 << 18
    VIF = 1 << 19
    VIP = 1 << 20
    ID = 1 << 21
    AI = 1 << 31


class Register:
    """A 16-, 32- or 64-bit general register.

    The value is stored once; ``low``, ``high``, ``word``, ``dword`` and
    ``qword`` are views onto its bytes, and writing one of them changes only
    the bits it covers, as a write to part of a register does.
    """

    __slots__ = ("_bits", "_value")

    def __init__(self, bits: int = 64, value: int = 0) -> None:
        if bits not in _SUPPORTED_WIDTHS:
            raise ValueError(f"unsupported register width: {bits}")
        self._bits = bits
        self._value = value & self._mask(bits)

    @staticmethod
    def _mask(bits: int) -> int:
        return (1 << bits) - 1

    @property
    def bits(self) -> int:
        """Width of the register in bits."""
        return self._bits

    @property
    def value(self) -> int:
        """The whole register as an unsigned integer."""
        return self._value

    @value.setter
    def value(self, new: int) -> None:
        self._value = new & self._mask(self._bits)

    def _read(self, shift: int, width: int) -> int:
        return (self._value >> shift) & self._mask(width)

    def _write(self, shift: int, width: int, new: int) -> None:
        field = self._mask(width) << shift
        self._value = (self._value & ~field) | ((new << shift) & field)
        self._value &= self._mask(self._bits)

    def _require(self, width: int, view: str) -> None:
        if self._bits < width:
            raise AttributeError(f"a {self._bits}-bit register has no {view} view")

    @property
    def low(self) -> int:
        """The low byte (``al``, ``bl``, ...)."""
        return self._read(0, 8)

    @low.setter
    def low(self, new: int) -> None:
        self._write(0, 8, new)

    byte = low

    @property
    def high(self) -> int:
        """The second byte (``ah``, ``bh``, ...)."""
        return self._read(8, 8)

    @high.setter
    def high(self, new: int) -> None:
        self._write(8, 8, new)

    @property
    def word(self) -> int:
        """The low 16 bits (``ax``, ``bx``, ...)."""
        return self._read(0, 16)

    @word.setter
    def word(self, new: int) -> None:
        self._write(0, 16, new)

    @property
    def dword(self) -> int:
        """The low 32 bits (``eax``, ``ebx``, ...)."""
        self._require(32, "dword")
        return self._read(0, 32)

    @dword.setter
    def dword(self, new: int) -> None:
        self._require(32, "dword")
        self._write(0, 32, new)

    @property
    def qword(self) -> int:
        """All 64 bits (``rax``, ``rbx``, ...)."""
        self._require(64, "qword")
        return self._value

    @qword.setter
    def qword(self, new: int) -> None:
        self._require(64, "qword")
        self._write(0, 64, new)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Register):
            return NotImplemented
        return self._bits == other._bits and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._bits, self._value))

    def __repr__(self) -> str:
        digits = self._bits // 4
        return f"Register(bits={self._bits}, value=0x{self._value:0{digits}x})"