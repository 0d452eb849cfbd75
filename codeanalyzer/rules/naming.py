"""
Rule for checking identifier casing.

Each declaration kind maps to exactly one convention:

  - types (class, interface, struct, enum, record, delegate), methods,
    properties, events and enum members: UpperCamelCase
  - fields (`const` included), parameters and local variables: lowerCamelCase

A name passes when its first character has the right case and it contains
no underscores. Fields may additionally carry one leading underscore
(`_camelCase`), the usual form for private backing fields. Discards (`_`)
are not checked, and verbatim identifiers are checked without their `@`.
"""

from typing import Callable, Dict, Iterator

from codeanalyzer.rules import Rule
from codeanalyzer.syntax import SyntaxTree
from codeanalyzer.utils.metadata import IdentifierType, NamingConvention, NamingViolation
from codeanalyzer.utils.settings import CHECK_NAMING


def is_upper_camel_case(name: str) -> bool:
    return bool(name) and name[0].isupper() and "_" not in name


def is_lower_camel_case(name: str) -> bool:
    return bool(name) and name[0].islower() and "_" not in name


def is_field_name(name: str) -> bool:
    if name.startswith("_") and len(name) > 1:
        name = name[1:]
    return is_lower_camel_case(name)


def to_upper_camel_case(name: str) -> str:
    """
    Convert an identifier to UpperCamelCase.

    Example:
      - "test_class" → "TestClass"
      - "testClass"  → "TestClass"
      - "_count"     → "Count"
    """
    parts = [part for part in name.split("_") if part]
    return "".join(part[0].upper() + part[1:] for part in parts) or name


def to_lower_camel_case(name: str) -> str:
    """
    Convert an identifier to lowerCamelCase.

    Example:
      - "MaxValue"  → "maxValue"
      - "max_value" → "maxValue"
    """
    pascal = to_upper_camel_case(name)
    return pascal[0].lower() + pascal[1:] if pascal else name


# declaration kind -> required convention
CONVENTIONS: Dict[IdentifierType, NamingConvention] = {
    IdentifierType.CLASS: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.INTERFACE: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.STRUCT: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.ENUM: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.RECORD: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.DELEGATE: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.METHOD: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.PROPERTY: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.EVENT: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.ENUM_MEMBER: NamingConvention.UPPER_CAMEL_CASE,
    IdentifierType.FIELD: NamingConvention.LOWER_CAMEL_CASE,
    IdentifierType.PARAMETER: NamingConvention.LOWER_CAMEL_CASE,
    IdentifierType.LOCAL_VARIABLE: NamingConvention.LOWER_CAMEL_CASE,
}

_PREDICATES: Dict[IdentifierType, Callable[[str], bool]] = {
    IdentifierType.FIELD: is_field_name,
}

_CHECKERS: Dict[NamingConvention, Callable[[str], bool]] = {
    NamingConvention.UPPER_CAMEL_CASE: is_upper_camel_case,
    NamingConvention.LOWER_CAMEL_CASE: is_lower_camel_case,
}

_CONVERTERS: Dict[NamingConvention, Callable[[str], str]] = {
    NamingConvention.UPPER_CAMEL_CASE: to_upper_camel_case,
    NamingConvention.LOWER_CAMEL_CASE: to_lower_camel_case,
}


class NamingConventionRule(Rule):
    @property
    def name(self) -> str:
        return CHECK_NAMING

    @property
    def description(self) -> str:
        return "Identifiers that break the casing convention for their kind"

    def check(self, tree: SyntaxTree, source) -> Iterator[NamingViolation]:
        for declaration in tree.declarations:
            name = declaration.name.lstrip("@")
            if not name.strip("_"):
                continue
            convention = CONVENTIONS[declaration.kind]
            predicate = _PREDICATES.get(declaration.kind, _CHECKERS[convention])
            if predicate(name):
                continue
            yield NamingViolation(
                identifier_name=declaration.name,
                identifier_type=declaration.kind,
                file=source.path,
                line=declaration.line,
                expected_convention=convention,
                suggested_name=_CONVERTERS[convention](name),
                message=f"{_label(declaration.kind)} names should use {convention.value}",
            )


def _label(kind: IdentifierType) -> str:
    return {
        IdentifierType.ENUM_MEMBER: "Enum member",
        IdentifierType.LOCAL_VARIABLE: "Local variable",
    }.get(kind, kind.value)
