"""Recursive-descent parser that turns a token stream into a syntax tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from .instructions import register_names
from .syntax_tree import NameValue, Node, NodeType, ValueKind
from .tokens import Token, TokenType, token_type_name
from .typenames import is_type_data, typename_to_int

_log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_INT_KINDS: dict[str | None, ValueKind] = {
    None: ValueKind.BITS64,
    "uint64_t": ValueKind.BITS64,
    "int64_t": ValueKind.BITS64,
    "uint32_t": ValueKind.BITS32,
    "int32_t": ValueKind.BITS32,
    "uint16_t": ValueKind.BITS16,
    "int16_t": ValueKind.BITS16,
    "uint8_t": ValueKind.BITS8,
    "int8_t": ValueKind.BITS8,
}

_STRING_TOKENS = frozenset(
    {TokenType.STRING_SINGLE, TokenType.STRING_DOUBLE, TokenType.DOC_STRING}
)


def _leading_int(text: str | None) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _unsigned(text: str | None, bits: int) -> int:
    return _leading_int(text) & ((1 << bits) - 1)


class ParseError(Exception):
    """Raised when the token stream does not follow the grammar."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


class Parser:
    """Builds a syntax tree from tokens.

    ``word_size`` is the target word size in bits; a word-size macro in the
    input changes it while parsing.
    """

    def __init__(self, tokens: Iterable[Token], word_size: int = 64) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._last_line = 0
        self.word_size = word_size
        self.token: Token = self._next()

    def _next(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return Token(TokenType.EOF, None, self._last_line)
        self._last_line = token.line
        return token

    def _error(self, message: str) -> ParseError:
        return ParseError(
            f"line {self.token.line}: {message} -> {self.token.value}", self.token
        )

    def eat(self, token_type: TokenType) -> Token:
        """Consume a token of ``token_type`` and return the next one.

        Space tokens in front are skipped. Asking for a space when none is
        there is not an error; the current token is returned unconsumed.
        """
        while self.token.type == TokenType.SPACE:
            self.token = self._next()
        if token_type == TokenType.SPACE:
            return self.token
        if self.token.type != token_type:
            raise ParseError(
                f"Token no esperado: {self.token.describe()}, "
                f"se esperaba un: {token_type_name(token_type)}",
                self.token,
            )
        self.token = self._next()
        return self.token

    def parse(self) -> Node:
        """Parse the whole stream into an ``INIT`` node holding each expression."""
        root = Node(NodeType.INIT)
        while self.token.type != TokenType.EOF:
            root.add_child(self.parse_expr())
        return root

    def parse_expr(self) -> Node:
        """Parse one expression, dispatching on the current token."""
        _log.debug("Token %s", self.token.describe())
        kind = self.token.type
        if kind == TokenType.ID:
            return self.parse_id()
        if kind in (TokenType.SPACE, TokenType.NEW_LINE):
            if kind == TokenType.SPACE:
                self.eat(TokenType.SPACE)
            self.eat(TokenType.NEW_LINE)
            return Node(NodeType.NOOP)
        if kind == TokenType.MACRO_SYSCALL:
            return self.parse_syscall()
        if kind == TokenType.INT:
            return self.parse_int()
        if kind == TokenType.EOF:
            return Node(NodeType.END)
        if kind == TokenType.MACRO_ENTRY_POINT:
            return self.parse_entry_point()
        if kind == TokenType.MACRO_WORD_SIZE:
            return self.parse_word_size()
        raise ParseError(
            f"Se esperaba un token {self.token.describe()}", self.token
        )

    def parse_id(self) -> Node:
        """Parse an identifier, optionally preceded by a type name."""
        type_data = None
        if is_type_data(self.token.value):
            type_data = self.token.value
            self.eat(TokenType.ID)
        name = self.token.value
        self.eat(TokenType.ID)

        kind = self.token.type
        if kind in (TokenType.ID, TokenType.ASSIGN):
            return self.parse_var(type_data, name)
        if kind == TokenType.LPAREN:
            return self.parse_function(name)
        if kind == TokenType.COLON:
            return self.parse_label(name)
        raise ParseError(
            f"No se esperaba este token {self.token.describe()}", self.token
        )

    def parse_var(self, type_data: str | None, name: str | None) -> Node:
        """Parse ``= value`` after a variable name into a ``VAR`` node."""
        data = NameValue(name=name)
        node = Node(NodeType.VAR, values=[data])
        self.eat(TokenType.ASSIGN)

        kind = self.token.type
        if kind in _STRING_TOKENS:
            data.value = self.token.value
            data.kind = ValueKind.STRING
            self.eat(kind)
        elif kind == TokenType.INT:
            value_kind = _INT_KINDS.get(type_data)
            if value_kind is None:
                raise ParseError(f"tipo de dato desconocido: {type_data}", self.token)
            data.value = _unsigned(self.token.value, value_kind.width)
            data.kind = value_kind
            self.eat(TokenType.INT)
        else:
            raise ParseError(
                f"No se esperaba este tipo de dato {self.token.describe()}",
                self.token,
            )

        if self.token.type == TokenType.SEMI:
            self.eat(TokenType.SEMI)
        return node

    def _named_body(self, node_type: NodeType, name: str | None) -> Node:
        if self.token.type == TokenType.COLON:
            self.eat(TokenType.COLON)
        node = Node(node_type, name=name)
        node.value = self.parse_expr()
        return node

    def parse_function(self, name: str | None) -> Node:
        """Parse a function whose body is the following expression."""
        return self._named_body(NodeType.FUNC, name)

    def parse_label(self, name: str | None) -> Node:
        """Parse ``name:`` followed by the expression it labels."""
        return self._named_body(NodeType.LABEL, name)

    def parse_list(self) -> Node:
        """Parse ``(expr, ...)`` with an optional ``: type`` suffix."""
        self.eat(TokenType.LPAREN)
        node = Node(NodeType.COMPOUND)
        node.add_child(self.parse_expr())
        while self.token.type == TokenType.COMMA:
            self.eat(TokenType.COMMA)
            node.add_child(self.parse_expr())
        self.eat(TokenType.RPAREN)

        if self.token.type == TokenType.COLON:
            self.eat(TokenType.COLON)
            while self.token.type == TokenType.ID:
                node.data_type = typename_to_int(self.token.value or "")
                self.eat(TokenType.ID)
                if self.token.type == TokenType.LT:
                    self.eat(TokenType.LT)
                    self.eat(TokenType.RT)
        return node

    def parse_int(self) -> Node:
        """Parse an integer constant into a ``VALUE`` node; what follows is its child."""
        value = _unsigned(self.token.value, 64)
        self.eat(TokenType.INT)
        if self.token.type == TokenType.COMMA:
            self.eat(TokenType.COMMA)
        node = Node(
            NodeType.VALUE, values=[NameValue(None, value, ValueKind.BITS64)]
        )
        node.add_child(self.parse_expr())
        return node

    def parse_syscall(self) -> Node:
        """Parse a syscall macro in its ``[reg = n, ...]`` or ``(n, ...)`` form."""
        self.eat(TokenType.MACRO_SYSCALL)
        node = Node(NodeType.SYSCALL, name="syscall")
        if self.token.type == TokenType.LBRACKET:
            self.eat(TokenType.LBRACKET)
            self._parse_syscall_registers(node)
            self.eat(TokenType.RBRACKET)
        elif self.token.type == TokenType.LPAREN:
            self.eat(TokenType.LPAREN)
            self._parse_syscall_arguments(node)
            self.eat(TokenType.RPAREN)
        else:
            raise self._error("valor no esperado")
        return node

    def _parse_syscall_registers(self, node: Node) -> None:
        while self.token.type != TokenType.RBRACKET:
            if self.token.type == TokenType.DOT:
                self.eat(TokenType.DOT)
                node.values.append(self._parse_syscall_attribute())
                if self.token.type == TokenType.COMMA:
                    self.eat(TokenType.COMMA)
                continue

            if self.token.type != TokenType.REGISTER:
                if self.token.type == TokenType.COMMA:
                    raise self._error("no se a expecificado un registro")
                if self.token.type == TokenType.INT:
                    raise self._error(
                        "no se a expecificado un registro al que asignar el valor"
                    )
                raise self._error("Usted no cerro la macro syscall")

            register = self.token.value
            self.eat(TokenType.REGISTER)
            self.eat(TokenType.ASSIGN)
            value = _unsigned(self.token.value, 64)
            self.eat(TokenType.INT)
            node.values.append(NameValue(register, value, ValueKind.BITS64))
            if self.token.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)

    def _parse_syscall_attribute(self) -> NameValue:
        attribute = self.token.value
        if attribute == "int":
            self.eat(TokenType.ID)
            self.eat(TokenType.ASSIGN)
            data = NameValue(attribute, self.token.value, ValueKind.STRING)
            self.eat(TokenType.INT)
            return data
        if attribute == "syscall":
            self.eat(TokenType.ID)
            return NameValue(attribute)
        raise ParseError("Este atributo no existe", self.token)

    def _parse_syscall_arguments(self, node: Node) -> None:
        counter = 0
        while self.token.type != TokenType.RPAREN:
            if self.token.type != TokenType.INT:
                raise self._error("No es un valor entero")
            try:
                names = register_names(self.word_size)
            except ValueError:
                raise ParseError(
                    f"Este size de palabra no se tenia contemplado: {self.word_size}",
                    self.token,
                ) from None
            if counter >= len(names):
                raise self._error("demasiados argumentos para la macro syscall")
            kind = {64: ValueKind.BITS64, 32: ValueKind.BITS32}.get(
                self.word_size, ValueKind.BITS16
            )
            value = _unsigned(self.token.value, kind.width)
            node.values.append(NameValue(names[counter], value, kind))
            counter += 1
            self.eat(TokenType.INT)
            if self.token.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)

    def parse_entry_point(self) -> Node:
        """Parse the entry-point macro and the label it names."""
        node = Node(NodeType.ENTRY_POINT)
        self.eat(TokenType.MACRO_ENTRY_POINT)
        node.name = self.token.value
        self.eat(TokenType.ID)
        return node

    def parse_word_size(self) -> Node:
        """Parse the word-size macro and set the parser's word size."""
        node = Node(NodeType.WORD_SIZE)
        self.eat(TokenType.MACRO_WORD_SIZE)
        self.word_size = _unsigned(self.token.value, 8)
        self.eat(TokenType.INT)
        return node