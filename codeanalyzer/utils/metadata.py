# codeanalyzer/utils/metadata.py

"""
Metadata definitions for findings emitted by CodeAnalyzer checks.

Every finding is a frozen dataclass: a value with no identity beyond its
fields, safe to hash, copy, or hand to another thread or process.

  - MethodInfo:          a method whose statement count reached the threshold
  - MagicNumberFinding:  a numeric literal outside the allow-list
  - NamingViolation:     an identifier that breaks the casing rule for its kind
  - DeadCodeFinding:     an unused `using` directive or an unreferenced declaration

Besides its own fields, each record exposes `check`, `file`, `line`,
`identifier` and `describe()` so reporters can render mixed result sets.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Dict

from codeanalyzer.utils.settings import (
    CHECK_DEAD_CODE,
    CHECK_LONG_METHODS,
    CHECK_MAGIC_NUMBERS,
    CHECK_NAMING,
)


class IdentifierType(str, Enum):
    CLASS = "Class"
    INTERFACE = "Interface"
    STRUCT = "Struct"
    ENUM = "Enum"
    RECORD = "Record"
    DELEGATE = "Delegate"
    METHOD = "Method"
    PROPERTY = "Property"
    EVENT = "Event"
    FIELD = "Field"
    ENUM_MEMBER = "EnumMember"
    PARAMETER = "Parameter"
    LOCAL_VARIABLE = "LocalVariable"

    def __str__(self) -> str:
        return self.value


class NamingConvention(str, Enum):
    UPPER_CAMEL_CASE = "UpperCamelCase"
    LOWER_CAMEL_CASE = "LowerCamelCase"

    def __str__(self) -> str:
        return self.value


class DeadCodeKind(str, Enum):
    UNUSED_IMPORT = "UnusedImport"
    UNREFERENCED_DECLARATION = "UnreferencedDeclaration"

    def __str__(self) -> str:
        return self.value


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class _Record:
    check: ClassVar[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        """Field mapping with enum members flattened to their string values."""
        return {key: _plain(value) for key, value in asdict(self).items()}


@dataclass(frozen=True)
class MethodInfo(_Record):
    check: ClassVar[str] = CHECK_LONG_METHODS

    method_name: str
    declaring_file: str
    start_line: int
    statement_count: int
    parameter_count: int = 0

    @property
    def file(self) -> str:
        return self.declaring_file

    @property
    def line(self) -> int:
        return self.start_line

    @property
    def identifier(self) -> str:
        return self.method_name

    def describe(self) -> str:
        return f"Method '{self.method_name}' has {self.statement_count} statements"


@dataclass(frozen=True)
class MagicNumberFinding(_Record):
    check: ClassVar[str] = CHECK_MAGIC_NUMBERS

    value: str
    file: str
    line: int
    column: int = 0
    context: str = ""

    @property
    def identifier(self) -> str:
        return self.value

    def describe(self) -> str:
        return f"Magic number {self.value} should be a named constant"


@dataclass(frozen=True)
class NamingViolation(_Record):
    check: ClassVar[str] = CHECK_NAMING

    identifier_name: str
    identifier_type: IdentifierType
    file: str
    line: int
    expected_convention: NamingConvention
    suggested_name: str = ""
    message: str = ""

    @property
    def identifier(self) -> str:
        return self.identifier_name

    def describe(self) -> str:
        return self.message or f"{self.identifier_type} names should use {self.expected_convention}"


@dataclass(frozen=True)
class DeadCodeFinding(_Record):
    check: ClassVar[str] = CHECK_DEAD_CODE

    kind: DeadCodeKind
    identifier: str
    file: str
    line: int

    def describe(self) -> str:
        if self.kind is DeadCodeKind.UNUSED_IMPORT:
            return f"Using directive '{self.identifier}' is never used"
        return f"'{self.identifier}' is declared but never referenced"
