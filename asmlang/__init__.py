"""Front end for a small x86 systems language: tokens, parser, syntax tree, tree formatting, register tables and assembly line builders."""

__version__ = "0.1.0"

__all__ = [
    "ast_format",
    "bytestring",
    "hashtable",
    "instructions",
    "parser",
    "registers",
    "syntax_tree",
    "tokens",
    "typenames",
]