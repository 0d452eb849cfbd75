"""
Syntax tree builders.

`build_tree(text, path)` picks a builder by file extension and returns a
SyntaxTree or a ParseFailure. Builders are plain callables
`(text, path) -> SyntaxTree | ParseFailure`; `register_builder` plugs in
another parser for another extension without touching the checks.
"""

import os
from typing import Callable, Dict, Union

from codeanalyzer.syntax.csharp import parse_csharp
from codeanalyzer.syntax.model import (
    DeclarationNode,
    ImportNode,
    LiteralNode,
    MethodNode,
    ParseFailure,
    ReferenceNode,
    StaticSyntaxTree,
    SyntaxTree,
)

TreeBuilder = Callable[[str, str], Union[SyntaxTree, ParseFailure]]

_DEFAULT_BUILDER: TreeBuilder = parse_csharp
_BUILDERS: Dict[str, TreeBuilder] = {".cs": parse_csharp}


def register_builder(extension: str, builder: TreeBuilder) -> None:
    """Use `builder` for files ending with `extension` (e.g. ".csx")."""
    _BUILDERS[extension.lower()] = builder


def build_tree(text: str, path: str = "") -> Union[SyntaxTree, ParseFailure]:
    """
    Parse `text` with the builder registered for `path`'s extension.

    Never raises for bad input: a builder that blows up is reported as a
    ParseFailure carrying the exception text.
    """
    extension = os.path.splitext(path)[1].lower()
    builder = _BUILDERS.get(extension, _DEFAULT_BUILDER)
    try:
        return builder(text, path)
    except Exception as e:  # a third-party builder must not abort a batch
        return ParseFailure(path=path, reason=f"{type(e).__name__}: {e}")


__all__ = [
    "DeclarationNode",
    "ImportNode",
    "LiteralNode",
    "MethodNode",
    "ParseFailure",
    "ReferenceNode",
    "StaticSyntaxTree",
    "SyntaxTree",
    "TreeBuilder",
    "build_tree",
    "register_builder",
]
