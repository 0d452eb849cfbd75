# codeanalyzer/utils/ast_utils.py

"""
Syntax-node utility functions for CodeAnalyzer.

These helpers simplify common inspection tasks on tree-sitter nodes:
  - Walking a subtree in document order without recursion
  - Extracting the source text and 1-based position of a node
  - Reading declaration names, modifiers and attributes
  - Converting C# numeric literal text into a comparable value
"""

from decimal import Decimal, InvalidOperation
from typing import Iterator, List, Optional

# Suffixes C# allows after a decimal/real literal (1L, 2u, 3UL, 1.5f, 2d, 9.99m)
_NUMERIC_SUFFIXES = "ulfdm"
_INTEGER_SUFFIXES = "ul"


def walk(node) -> Iterator:
    """
    Yield `node` and all of its descendants in pre-order (document order).

    Uses an explicit stack so deeply nested sources cannot exhaust the
    interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(node, source: bytes) -> str:
    """
    Return the source text spanned by `node`.

    :param node: tree-sitter Node
    :param source: The exact bytes the tree was parsed from
    :return: Decoded text (undecodable bytes replaced)
    """
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def line_of(node) -> int:
    """1-based line number of the node's first character."""
    return node.start_point[0] + 1


def column_of(node) -> int:
    """0-based column of the node's first character."""
    return node.start_point[1]


def name_node(node):
    """
    Return the identifier node naming a declaration, or None.

    Prefers the grammar's `name` field; falls back to the first direct
    identifier child for nodes that do not expose the field.
    """
    named = node.child_by_field_name("name")
    if named is not None:
        return named
    for child in node.named_children:
        if child.type == "identifier":
            return child
    return None


def modifiers_of(node, source: bytes) -> List[str]:
    """
    Return the modifier keywords (public, static, const, override, ...)
    attached directly to a declaration node.
    """
    return [node_text(child, source) for child in node.children if child.type == "modifier"]


def has_attributes(node) -> bool:
    """Return True if the declaration carries at least one `[Attribute]` list."""
    return any(child.type == "attribute_list" for child in node.children)


def find_first_error(node) -> Optional[object]:
    """
    Return the first ERROR or MISSING node in document order, or None when the
    subtree parsed cleanly.
    """
    if not node.has_error:
        return None
    for current in walk(node):
        if current.type == "ERROR" or current.is_missing:
            return current
    return node


def parse_numeric_literal(text: str) -> Optional[Decimal]:
    """
    Convert C# numeric literal text into a Decimal, or None if it is not a number.

    Handles an optional leading sign, digit separators (1_000), hexadecimal
    (0xFF) and binary (0b1010) forms, and type suffixes (10L, 2.5f, 9.99m).

    Example:
      - "1920" → Decimal("1920")
      - "-1"   → Decimal("-1")
      - "2.0f" → Decimal("2.0")
      - "0x10" → Decimal("16")
    """
    candidate = "".join(str(text).split()).replace("_", "").lower()
    sign = 1
    if candidate.startswith("-"):
        sign = -1
        candidate = candidate[1:]
    elif candidate.startswith("+"):
        candidate = candidate[1:]
    if not candidate:
        return None

    try:
        if candidate.startswith("0x"):
            value = Decimal(int(candidate[2:].rstrip(_INTEGER_SUFFIXES), 16))
        elif candidate.startswith("0b"):
            value = Decimal(int(candidate[2:].rstrip(_INTEGER_SUFFIXES), 2))
        else:
            value = Decimal(candidate.rstrip(_NUMERIC_SUFFIXES))
    except (InvalidOperation, ValueError):
        return None

    if not value.is_finite():
        return None
    return value * sign
