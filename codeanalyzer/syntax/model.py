# codeanalyzer/syntax/model.py

"""
Parser-independent syntax tree model.

Checks never touch a concrete parser. They consume a `SyntaxTree`, which
exposes five flat, document-ordered views of one parsed file:

  - methods:       method-like declarations with their statement count
  - literals:      numeric literal expressions (sign-preserving text)
  - declarations:  named declarations tagged with an IdentifierType
  - imports:       `using` directives and the namespace they bring in
  - references:    identifier occurrences that are not declaration sites

A parser that cannot produce a usable tree returns a `ParseFailure` value
instead of raising.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from codeanalyzer.utils.metadata import IdentifierType


@dataclass(frozen=True)
class MethodNode:
    name: str
    kind: str  # method | constructor | destructor | local_function | operator
    line: int
    column: int
    statement_count: int
    parameter_count: int = 0


@dataclass(frozen=True)
class LiteralNode:
    text: str
    kind: str  # integer | real
    line: int
    column: int


@dataclass(frozen=True)
class DeclarationNode:
    name: str
    kind: IdentifierType
    line: int
    column: int
    modifiers: Tuple[str, ...] = ()
    has_attributes: bool = False
    is_explicit_interface: bool = False
    namespace: str = ""
    container: str = ""  # enclosing type name, empty at namespace level

    def has_modifier(self, modifier: str) -> bool:
        return modifier in self.modifiers


@dataclass(frozen=True)
class ImportNode:
    namespace: str
    line: int
    alias: Optional[str] = None
    is_static: bool = False
    is_global: bool = False

    @property
    def last_segment(self) -> str:
        # "System.Collections.Generic" -> "Generic", "global::Foo.Bar<T>" -> "Bar"
        name = self.namespace.split("::")[-1].split("<")[0]
        return name.split(".")[-1]


@dataclass(frozen=True)
class ReferenceNode:
    name: str
    line: int


@dataclass(frozen=True)
class ParseFailure:
    path: str
    reason: str
    line: int = 0

    def __bool__(self) -> bool:
        return False


class SyntaxTree(ABC):
    """Read-only view of one parsed source file."""

    path: str = ""

    @property
    @abstractmethod
    def methods(self) -> List[MethodNode]:
        """Method-like declarations, in declaration order."""

    @property
    @abstractmethod
    def literals(self) -> List[LiteralNode]:
        """Numeric literal expressions, in document order."""

    @property
    @abstractmethod
    def declarations(self) -> List[DeclarationNode]:
        """Named declarations of every kind, in document order."""

    @property
    @abstractmethod
    def imports(self) -> List[ImportNode]:
        """Import (`using`) directives, in document order."""

    @property
    @abstractmethod
    def references(self) -> List[ReferenceNode]:
        """Identifier uses, excluding declaration sites and import directives."""


@dataclass
class StaticSyntaxTree(SyntaxTree):
    """
    A SyntaxTree backed by plain lists. Useful for parsers that build the
    model eagerly, and for feeding hand-made trees to the checks.
    """

    path: str = ""
    method_nodes: List[MethodNode] = field(default_factory=list)
    literal_nodes: List[LiteralNode] = field(default_factory=list)
    declaration_nodes: List[DeclarationNode] = field(default_factory=list)
    import_nodes: List[ImportNode] = field(default_factory=list)
    reference_nodes: List[ReferenceNode] = field(default_factory=list)

    @property
    def methods(self) -> List[MethodNode]:
        return self.method_nodes

    @property
    def literals(self) -> List[LiteralNode]:
        return self.literal_nodes

    @property
    def declarations(self) -> List[DeclarationNode]:
        return self.declaration_nodes

    @property
    def imports(self) -> List[ImportNode]:
        return self.import_nodes

    @property
    def references(self) -> List[ReferenceNode]:
        return self.reference_nodes
