"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Every kind of token the lexer can produce, in their numeric order."""

    ID = 0
    MACRO_SYSCALL = 1
    MACRO_DEFINE = 2
    LPAREN = 3
    RPAREN = 4
    LBRACE = 5
    RBRACE = 6
    COLON = 7
    SEMI = 8
    COMMA = 9
    LT = 10
    RT = 11
    EOF = 12
    ASSIGN = 13
    EQUAL = 14
    INT = 15
    REGISTER_RESERVED = 16
    LBRACKET = 17
    RBRACKET = 18
    REGISTER = 19
    DOT = 20
    STRING_SINGLE = 21
    STRING_DOUBLE = 22
    DOC_STRING = 23
    MACRO_ENTRY_POINT = 24
    SPACE = 25
    NEW_LINE = 26
    MACRO_WORD_SIZE = 27


UNKNOWN_TOKEN_NAME = "not_stringable"

_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.ID: "TOKEN_ID",
    TokenType.MACRO_SYSCALL: "TOKKEN_MACRO_SYSCALL",
    TokenType.MACRO_DEFINE: "TOKKEN_MACRO_DEFINE",
    TokenType.LPAREN: "TOKEN_LPAREN",
    TokenType.RPAREN: "TOKEN_RPAREN",
    TokenType.LBRACE: "TOKEN_LBRACE",
    TokenType.RBRACE: "TOKEN_RBRACE",
    TokenType.COLON: "TOKEN_COLON",
    TokenType.SEMI: "TOKEN_SEMI",
    TokenType.COMMA: "TOKEN_COMMA",
    TokenType.LT: "TOKEN_LT",
    TokenType.RT: "TOKEN_RT",
    TokenType.EOF: "TOKEN_EOF",
    TokenType.ASSIGN: "TOKEN_ASIGNACION",
    TokenType.EQUAL: "TOKEN_IGUAL",
    TokenType.INT: "TOKEN_INT",
    TokenType.LBRACKET: "TOKEN_LCORCHETES",
    TokenType.RBRACKET: "TOKEN_RCORCHETES",
    TokenType.REGISTER: "TOKEN_REGISTRO",
    TokenType.DOT: "TOKEN_PUNTO",
    TokenType.STRING_SINGLE: "TOKEN_STRING_SIMPLE",
    TokenType.STRING_DOUBLE: "TOKEN_STRING_DOBLE",
    TokenType.DOC_STRING: "TOKEN_DOC_STRING",
    TokenType.MACRO_ENTRY_POINT: "TOKKEN_MACRO_ENTRY_POINT",
    TokenType.SPACE: "TOKEN_SPACE",
    TokenType.NEW_LINE: "TOKEN_NEW_LINE",
    TokenType.MACRO_WORD_SIZE: "TOKKEN_MACRO_WORD_SIZE",
}


def token_type_name(token_type: TokenType | int) -> str:
    """Return the display name of a token kind, or ``"not_stringable"``."""
    try:
        kind = TokenType(token_type)
    except ValueError:
        return UNKNOWN_TOKEN_NAME
    return _DISPLAY_NAMES.get(kind, UNKNOWN_TOKEN_NAME)


@dataclass
class Token:
    """A lexed token: its kind, its text and the line it was found on."""

    type: TokenType
    value: str | None = None
    line: int = 0

    def _printable(self) -> bool:
        return bool(self.value) and self.value[0] not in "\n\r"

    def describe(self) -> str:
        """Return a one-line human readable description of the token."""
        shown = self.value if self._printable() else "not printeable"
        return (
            f"<type={token_type_name(self.type)}, \tint_type={int(self.type)}, "
            f"\tvalue={shown}, line={self.line}>"
        )

    def __str__(self) -> str:
        return self.describe()