# asmlang

The front end of a compiler for a small language that maps closely onto x86
assembly. The package has no third-party dependencies. It provides:

- `asmlang.tokens`: the `TokenType` enumeration, the `Token` dataclass
  (`type`, `value`, `line`) with `Token.describe()`, and `token_type_name()`.
- `asmlang.typenames`: `is_type_data()`, which recognises the built-in type
  names (`uint8_t` … `int64_t`, `string`, `char`, `float`, `bool`), and
  `typename_to_int()`.
- `asmlang.syntax_tree`: `Node`, `NodeType`, `NameValue` and `ValueKind`.
- `asmlang.parser`: `Parser`, a recursive-descent parser. It handles typed and
  untyped variables, labels, functions, integer constants, and the `syscall`,
  entry-point and word-size macros. It raises `ParseError` when the input
  breaks the grammar.
- `asmlang.ast_format`: `format_ast()`, which renders a tree as an indented
  text outline.
- `asmlang.instructions`: `register_names()` for 16-, 32- and 64-bit targets,
  and line builders `asm_mov`, `asm_interrupt`, `asm_syscall`, `asm_push`,
  `asm_define` and `asm_sub`.
- `asmlang.registers`: `Flag` (the FLAGS/EFLAGS bits) and `Register`, a 16-,
  32- or 64-bit value with `low`, `high`, `word`, `dword` and `qword` views.
- `asmlang.hashtable`: `HashTable`, a chained table keyed by strings, and
  `djb2_hash()`.
- `asmlang.bytestring`: `ByteString`, a byte buffer that keeps its length
  across assignments.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing tokens

```python
from asmlang.tokens import Token, TokenType
from asmlang.parser import Parser
from asmlang.ast_format import format_ast

tokens = [
    Token(TokenType.ID, "uint32_t"),
    Token(TokenType.ID, "counter"),
    Token(TokenType.ASSIGN, "="),
    Token(TokenType.INT, "42"),
    Token(TokenType.SEMI, ";"),
    Token(TokenType.EOF),
]

root = Parser(tokens, word_size=64).parse()
print(format_ast(root, 64))
# Abstract Syntax Tree(size: 1):
# |--- Nodo de inicio
# --- counter = <32@42>
```

If the token sequence runs out, the parser supplies an end-of-file token.
A word-size macro in the input changes `Parser.word_size` while parsing.
The positional `syscall (...)` form takes its register names from that word
size.

## Building assembly text

```python
from asmlang.instructions import asm_define, asm_mov, asm_push, asm_syscall, register_names

print(asm_mov("rax", "60"))          # mov rax, 60
print(asm_push("qword", 1))          # push qword 1
print(asm_define("SYS_EXIT", 60))    # %define SYS_EXIT 60
print(asm_syscall())                 # syscall
print(register_names(32)[:4])        # ('eax', 'ebx', 'ecx', 'edx')
```

## What the package does not do

- It has no lexer. Source text must already be split into `Token` values.
- It does not generate code from a syntax tree and does not write output
  files.
- It provides no command-line program. It is used as a library.