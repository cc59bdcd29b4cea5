"""Text rendering of a syntax tree as an indented outline."""

from __future__ import annotations

from .syntax_tree import NameValue, Node, NodeType, ValueKind

_NULL = "(null)"


def _text(value: object) -> str:
    return _NULL if value is None else str(value)


def _prefix(indent: int, is_last: bool) -> str:
    parts = []
    if indent == 0:
        parts.append("|--- ")
    parts.extend((" \t|" if is_last else "|\t") for _ in range(indent - 1))
    if indent > 0:
        parts.append("--- " if is_last else "|--- ")
    return "".join(parts)


def _syscall_lines(node: Node, word_size: int) -> list[str]:
    lines = [
        f"Syscall({_text(node.name)})\n",
        f"size list: {len(node.values)}\n",
    ]
    masks = {64: 0xFFFFFFFFFFFFFFFF, 32: 0xFFFFFFFF, 16: 0xFFFF}
    for position, entry in enumerate(node.values):
        mask = masks.get(word_size)
        if mask is None:
            lines.append(f"[{position}] {_text(entry.name)} = <unsupported word size>\n")
        elif isinstance(entry.value, int):
            lines.append(f"[{position}] {_text(entry.name)} = {entry.value & mask}\n")
        else:
            lines.append(f"[{position}] {_text(entry.name)} = {_text(entry.value)}\n")
    return lines


def _var_lines(node: Node, word_size: int) -> list[str]:
    lines = []
    for entry in node.values:
        lines.append(f"{_text(entry.name)} = ")
        lines.append(_describe_value(entry, word_size))
    return lines


def _describe_value(entry: NameValue, word_size: int) -> str:
    kind = entry.kind
    if kind is None:
        return ""
    if kind.width is not None:
        return f"<{kind.width}@{entry.value}>\n"
    if kind == ValueKind.POINTER:
        return f"<pointer@{_text(entry.value)}>\n"
    if kind == ValueKind.AST_NODE:
        nested = entry.value if isinstance(entry.value, Node) else None
        return "<ast>\n" + format_ast(nested, word_size)
    if kind == ValueKind.STRING:
        return f"<string@'{_text(entry.value)}'>\n"
    return ""


def _describe(node: Node, word_size: int) -> list[str]:
    kind = node.type
    if kind == NodeType.INIT:
        return ["Nodo de inicio\n"]
    if kind == NodeType.COMPOUND:
        return [f"Compound({_text(node.name)})\n"]
    if kind == NodeType.SYSCALL:
        return _syscall_lines(node, word_size)
    if kind == NodeType.ASSIGNMENT:
        return [f"Assignment: {_text(node.name)}\n"]
    if kind == NodeType.VARIABLE:
        return [f"Variable: {_text(node.name)}\n"]
    if kind == NodeType.STATEMENT:
        return ["Statement\n"]
    if kind == NodeType.NOOP:
        return ["Noop\n"]
    if kind == NodeType.VALUE:
        shown = node.values[0].value if node.values else None
        return [f"Value({_text(shown)})\n"]
    if kind == NodeType.LABEL:
        body = node.value.type.name if node.value is not None else _NULL
        return [f"Name funcion: {_text(node.name)}\n", f"Node AST: {body}\n"]
    if kind == NodeType.WORD_SIZE:
        return [f"set word size to: {word_size}\n"]
    if kind == NodeType.ENTRY_POINT:
        return [f"punto de entrada establecido en {_text(node.name)}\n"]
    if kind == NodeType.VAR:
        return _var_lines(node, word_size)
    return [f"Unknown Node Type({int(kind)})\n"]


def _format_node(node: Node, indent: int, is_last: bool, word_size: int) -> list[str]:
    lines = [_prefix(indent, is_last)]
    lines.extend(_describe(node, word_size))
    count = len(node.children)
    for position, child in enumerate(node.children):
        lines.extend(_format_node(child, indent + 1, position == count - 1, word_size))
    return lines


def format_ast(root: Node | None, word_size: int = 64) -> str:
    """Render a syntax tree as text, one node after another, children indented."""
    if root is None:
        return "AST is empty.\n"
    header = f"Abstract Syntax Tree(size: {len(root.children)}): \n"
    return header + "".join(_format_node(root, 0, True, word_size))