import pytest

from asmlang.parser import ParseError, Parser
from asmlang.syntax_tree import NodeType, ValueKind
from asmlang.tokens import Token, TokenType
from asmlang.typenames import typename_to_int


def tok(kind, value=None, line=0):
    return Token(kind, value, line)


def parse(tokens, word_size=64):
    return Parser(tokens, word_size).parse()


def test_empty_stream_gives_empty_root():
    root = parse([])
    assert root.type == NodeType.INIT
    assert root.children == []


def test_untyped_variable_is_64_bit():
    root = parse([
        tok(TokenType.ID, "x"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "5"),
        tok(TokenType.SEMI, ";"),
    ])
    assert len(root.children) == 1
    var = root.children[0]
    assert var.type == NodeType.VAR
    assert var.values[0].name == "x"
    assert var.values[0].value == 5
    assert var.values[0].kind == ValueKind.BITS64


@pytest.mark.parametrize(
    "type_name, kind",
    [
        ("uint8_t", ValueKind.BITS8),
        ("int16_t", ValueKind.BITS16),
        ("uint32_t", ValueKind.BITS32),
        ("int64_t", ValueKind.BITS64),
    ],
)
def test_typed_variable_kind(type_name, kind):
    root = parse([
        tok(TokenType.ID, type_name),
        tok(TokenType.ID, "v"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "7"),
    ])
    data = root.children[0].values[0]
    assert data.kind == kind
    assert data.value == 7
    assert data.name == "v"


def test_typed_variable_truncates_to_width():
    root = parse([
        tok(TokenType.ID, "uint8_t"),
        tok(TokenType.ID, "v"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "256"),
    ])
    assert root.children[0].values[0].value == 0


@pytest.mark.parametrize(
    "kind", [TokenType.STRING_SINGLE, TokenType.STRING_DOUBLE, TokenType.DOC_STRING]
)
def test_string_variable(kind):
    root = parse([
        tok(TokenType.ID, "s"),
        tok(TokenType.ASSIGN, "="),
        tok(kind, "hola"),
    ])
    data = root.children[0].values[0]
    assert data.value == "hola"
    assert data.kind == ValueKind.STRING


def test_integer_for_non_integer_type_is_rejected():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.ID, "string"),
            tok(TokenType.ID, "s"),
            tok(TokenType.ASSIGN, "="),
            tok(TokenType.INT, "1"),
        ])


def test_unexpected_value_in_assignment():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.ID, "x"),
            tok(TokenType.ASSIGN, "="),
            tok(TokenType.LBRACE, "{"),
        ])


def test_bracket_syscall_registers():
    root = parse([
        tok(TokenType.MACRO_SYSCALL, "#syscall"),
        tok(TokenType.LBRACKET, "["),
        tok(TokenType.REGISTER, "rax"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "60"),
        tok(TokenType.COMMA, ","),
        tok(TokenType.REGISTER, "rdi"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "0"),
        tok(TokenType.RBRACKET, "]"),
    ])
    node = root.children[0]
    assert node.type == NodeType.SYSCALL
    assert node.name == "syscall"
    assert [(v.name, v.value) for v in node.values] == [("rax", 60), ("rdi", 0)]


def test_bracket_syscall_attributes():
    root = parse([
        tok(TokenType.MACRO_SYSCALL, "#syscall"),
        tok(TokenType.LBRACKET, "["),
        tok(TokenType.DOT, "."),
        tok(TokenType.ID, "int"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "128"),
        tok(TokenType.COMMA, ","),
        tok(TokenType.DOT, "."),
        tok(TokenType.ID, "syscall"),
        tok(TokenType.RBRACKET, "]"),
    ])
    values = root.children[0].values
    assert values[0].name == "int"
    assert values[0].value == "128"
    assert values[1].name == "syscall"


def test_bracket_syscall_unknown_attribute():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LBRACKET, "["),
            tok(TokenType.DOT, "."),
            tok(TokenType.ID, "nope"),
            tok(TokenType.RBRACKET, "]"),
        ])


def test_bracket_syscall_value_without_register():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LBRACKET, "["),
            tok(TokenType.INT, "1"),
            tok(TokenType.RBRACKET, "]"),
        ])


def test_bracket_syscall_unclosed():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LBRACKET, "["),
        ])


@pytest.mark.parametrize(
    "word_size, names",
    [(64, ["rax", "rbx", "rcx"]), (32, ["eax", "ebx", "ecx"]), (16, ["ax", "bx", "cx"])],
)
def test_paren_syscall_assigns_registers_in_order(word_size, names):
    root = parse(
        [
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LPAREN, "("),
            tok(TokenType.INT, "1"),
            tok(TokenType.COMMA, ","),
            tok(TokenType.INT, "2"),
            tok(TokenType.COMMA, ","),
            tok(TokenType.INT, "3"),
            tok(TokenType.RPAREN, ")"),
        ],
        word_size,
    )
    values = root.children[0].values
    assert [v.name for v in values] == names
    assert [v.value for v in values] == [1, 2, 3]


def test_paren_syscall_rejects_non_integer():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LPAREN, "("),
            tok(TokenType.ID, "x"),
            tok(TokenType.RPAREN, ")"),
        ])


def test_syscall_needs_bracket_or_paren():
    with pytest.raises(ParseError):
        parse([tok(TokenType.MACRO_SYSCALL, "#syscall"), tok(TokenType.INT, "1")])


def test_word_size_macro_changes_register_set():
    parser = Parser([
        tok(TokenType.MACRO_WORD_SIZE, "#word"),
        tok(TokenType.INT, "16"),
        tok(TokenType.MACRO_SYSCALL, "#syscall"),
        tok(TokenType.LPAREN, "("),
        tok(TokenType.INT, "4"),
        tok(TokenType.RPAREN, ")"),
    ])
    root = parser.parse()
    assert parser.word_size == 16
    assert root.children[0].type == NodeType.WORD_SIZE
    assert root.children[1].values[0].name == "ax"


def test_unsupported_word_size_fails_syscall():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.MACRO_WORD_SIZE, "#word"),
            tok(TokenType.INT, "8"),
            tok(TokenType.MACRO_SYSCALL, "#syscall"),
            tok(TokenType.LPAREN, "("),
            tok(TokenType.INT, "4"),
            tok(TokenType.RPAREN, ")"),
        ])


def test_entry_point():
    root = parse([
        tok(TokenType.MACRO_ENTRY_POINT, "#entry"),
        tok(TokenType.ID, "_start"),
    ])
    node = root.children[0]
    assert node.type == NodeType.ENTRY_POINT
    assert node.name == "_start"


def test_label_holds_following_expression():
    root = parse([
        tok(TokenType.ID, "_start"),
        tok(TokenType.COLON, ":"),
        tok(TokenType.MACRO_ENTRY_POINT, "#entry"),
        tok(TokenType.ID, "main"),
    ])
    label = root.children[0]
    assert label.type == NodeType.LABEL
    assert label.name == "_start"
    assert label.value.type == NodeType.ENTRY_POINT
    assert label.value.name == "main"


def test_function_with_parenthesis_is_rejected():
    with pytest.raises(ParseError):
        parse([
            tok(TokenType.ID, "f"),
            tok(TokenType.LPAREN, "("),
            tok(TokenType.RPAREN, ")"),
        ])


def test_integer_value_chains_next_expression():
    root = parse([tok(TokenType.INT, "5")])
    assert len(root.children) == 1
    value = root.children[0]
    assert value.type == NodeType.VALUE
    assert value.values[0].value == 5
    assert [c.type for c in value.children] == [NodeType.END]


def test_new_lines_become_noops():
    root = parse([tok(TokenType.NEW_LINE, "\n"), tok(TokenType.NEW_LINE, "\n")])
    assert [c.type for c in root.children] == [NodeType.NOOP, NodeType.NOOP]


def test_space_then_new_line_is_one_noop():
    root = parse([tok(TokenType.SPACE, " "), tok(TokenType.NEW_LINE, "\n")])
    assert [c.type for c in root.children] == [NodeType.NOOP]


def test_unexpected_top_level_token():
    with pytest.raises(ParseError) as info:
        parse([tok(TokenType.RBRACE, "}")])
    assert info.value.token.type == TokenType.RBRACE


def test_eat_skips_spaces_and_advances():
    parser = Parser([
        tok(TokenType.SPACE, " "),
        tok(TokenType.ID, "a"),
        tok(TokenType.COMMA, ","),
    ])
    following = parser.eat(TokenType.ID)
    assert following.type == TokenType.COMMA
    assert parser.token is following


def test_eat_mismatch_raises():
    parser = Parser([tok(TokenType.INT, "1")])
    with pytest.raises(ParseError):
        parser.eat(TokenType.ID)
    assert parser.token.type == TokenType.INT


def test_eat_space_when_absent_does_not_consume():
    parser = Parser([tok(TokenType.ID, "a")])
    assert parser.eat(TokenType.SPACE).type == TokenType.ID
    assert parser.token.value == "a"


def test_parse_list_with_type_suffix():
    parser = Parser([
        tok(TokenType.LPAREN, "("),
        tok(TokenType.ID, "x"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "1"),
        tok(TokenType.COMMA, ","),
        tok(TokenType.ID, "y"),
        tok(TokenType.ASSIGN, "="),
        tok(TokenType.INT, "2"),
        tok(TokenType.RPAREN, ")"),
        tok(TokenType.COLON, ":"),
        tok(TokenType.ID, "bool"),
        tok(TokenType.LT, "<"),
        tok(TokenType.RT, ">"),
    ])
    node = parser.parse_list()
    assert node.type == NodeType.COMPOUND
    assert [c.values[0].name for c in node.children] == ["x", "y"]
    assert node.data_type == typename_to_int("bool")
    assert parser.token.type == TokenType.EOF