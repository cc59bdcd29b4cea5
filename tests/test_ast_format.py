from asmlang.ast_format import format_ast
from asmlang.parser import Parser
from asmlang.syntax_tree import NameValue, Node, NodeType, ValueKind
from asmlang.tokens import Token, TokenType


def test_empty_tree():
    assert format_ast(None) == "AST is empty.\n"


def test_lone_root():
    text = format_ast(Node(NodeType.INIT))
    assert text == "Abstract Syntax Tree(size: 0): \n|--- Nodo de inicio\n"


def test_header_counts_children():
    root = Node(NodeType.INIT)
    root.add_child(Node(NodeType.NOOP))
    root.add_child(Node(NodeType.NOOP))
    text = format_ast(root)
    assert text.startswith("Abstract Syntax Tree(size: 2): \n")
    assert text.count("Noop\n") == 2


def test_child_prefixes_mark_last_child():
    root = Node(NodeType.INIT)
    root.add_child(Node(NodeType.NOOP))
    root.add_child(Node(NodeType.STATEMENT))
    lines = format_ast(root).splitlines()
    assert lines[2] == "|--- Noop"
    assert lines[3] == "--- Statement"


def test_variable_values():
    var = Node(
        NodeType.VAR,
        values=[NameValue("x", 7, ValueKind.BITS8), NameValue("s", "hi", ValueKind.STRING)],
    )
    text = format_ast(var)
    assert "x = <8@7>\n" in text
    assert "s = <string@'hi'>\n" in text


def test_entry_point_and_word_size():
    root = Node(NodeType.INIT)
    root.add_child(Node(NodeType.ENTRY_POINT, name="_start"))
    root.add_child(Node(NodeType.WORD_SIZE))
    text = format_ast(root, 32)
    assert "punto de entrada establecido en _start\n" in text
    assert "set word size to: 32\n" in text


def test_unknown_node_type():
    text = format_ast(Node(NodeType.END))
    assert f"Unknown Node Type({int(NodeType.END)})\n" in text


def test_syscall_values_are_masked_by_word_size():
    node = Node(
        NodeType.SYSCALL,
        name="syscall",
        values=[NameValue("eax", (1 << 40) + 5, ValueKind.BITS64)],
    )
    text = format_ast(node, 32)
    assert "Syscall(syscall)\n" in text
    assert "[0] eax = 5\n" in text


def test_parsed_program_renders_each_statement():
    tokens = [
        Token(TokenType.ID, "uint8_t"),
        Token(TokenType.ID, "a"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.INT, "3"),
        Token(TokenType.SEMI, ";"),
        Token(TokenType.MACRO_ENTRY_POINT, "entry"),
        Token(TokenType.ID, "main"),
    ]
    root = Parser(tokens).parse()
    text = format_ast(root)
    assert text.startswith("Abstract Syntax Tree(size: 2): \n")
    assert "a = <8@3>\n" in text
    assert "punto de entrada establecido en main\n" in text


def test_missing_name_shows_null():
    assert "Compound((null))\n" in format_ast(Node(NodeType.COMPOUND))