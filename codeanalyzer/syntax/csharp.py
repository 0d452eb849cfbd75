# codeanalyzer/syntax/csharp.py

"""
C# front end built on tree-sitter.

`parse_csharp(text, path)` parses one file with the tree-sitter C# grammar
and flattens the concrete tree into the parser-independent model of
`codeanalyzer.syntax.model`. tree-sitter never raises on bad input; it
recovers and marks ERROR/MISSING nodes instead. A tree carrying any such
node is reported as a ParseFailure so that half-recovered code never
produces findings.
"""

from functools import lru_cache
from typing import Dict, Optional, Set, Union

import tree_sitter
import tree_sitter_c_sharp

from codeanalyzer.syntax.model import (
    DeclarationNode,
    ImportNode,
    LiteralNode,
    MethodNode,
    ParseFailure,
    ReferenceNode,
    StaticSyntaxTree,
)
from codeanalyzer.utils.ast_utils import (
    column_of,
    find_first_error,
    has_attributes,
    line_of,
    modifiers_of,
    name_node,
    node_text,
    walk,
)
from codeanalyzer.utils.logger import get_logger
from codeanalyzer.utils.metadata import IdentifierType

LOG = get_logger(__name__)

_NAMESPACE_NODES = {"namespace_declaration", "file_scoped_namespace_declaration"}

_TYPE_NODES: Dict[str, IdentifierType] = {
    "class_declaration": IdentifierType.CLASS,
    "interface_declaration": IdentifierType.INTERFACE,
    "struct_declaration": IdentifierType.STRUCT,
    "enum_declaration": IdentifierType.ENUM,
    "record_declaration": IdentifierType.RECORD,
    "record_struct_declaration": IdentifierType.RECORD,
    "delegate_declaration": IdentifierType.DELEGATE,
}

# Member declarations named by their own `name` field
_MEMBER_NODES: Dict[str, IdentifierType] = {
    "method_declaration": IdentifierType.METHOD,
    "local_function_statement": IdentifierType.METHOD,
    "property_declaration": IdentifierType.PROPERTY,
    "event_declaration": IdentifierType.EVENT,
    "enum_member_declaration": IdentifierType.ENUM_MEMBER,
}

_METHOD_KINDS = {
    "method_declaration": "method",
    "constructor_declaration": "constructor",
    "destructor_declaration": "destructor",
    "local_function_statement": "local_function",
    "operator_declaration": "operator",
    "conversion_operator_declaration": "operator",
}

_LITERAL_KINDS = {"integer_literal": "integer", "real_literal": "real"}


@lru_cache(maxsize=None)
def _language() -> tree_sitter.Language:
    return tree_sitter.Language(tree_sitter_c_sharp.language())


def parse_csharp(text: str, path: str = "") -> Union[StaticSyntaxTree, ParseFailure]:
    """
    Parse C# source text into a SyntaxTree, or return a ParseFailure.

    A fresh Parser is created per call, so concurrent callers share nothing
    mutable beyond the immutable Language object.
    """
    try:
        source = text.encode("utf-8")
    except (AttributeError, UnicodeEncodeError) as e:
        return ParseFailure(path=path, reason=f"source is not encodable text: {e}")

    try:
        tree = tree_sitter.Parser(_language()).parse(source)
    except (ValueError, RuntimeError) as e:
        return ParseFailure(path=path, reason=f"parser error: {e}")

    error_node = find_first_error(tree.root_node)
    if error_node is not None:
        line = line_of(error_node)
        LOG.debug("Syntax error in %s at line %d", path, line)
        return ParseFailure(path=path, reason="syntax error", line=line)

    return _TreeFlattener(source, path).flatten(tree.root_node)


class _TreeFlattener:
    """Single pre-order pass turning a tree-sitter tree into model nodes."""

    def __init__(self, source: bytes, path: str):
        self.source = source
        self.path = path
        self.result = StaticSyntaxTree(path=path)
        # start bytes of identifiers that name something rather than use it
        self._declaration_sites: Set[int] = set()
        self._file_namespace = ""

    def flatten(self, root) -> StaticSyntaxTree:
        # (node, namespace, enclosing type)
        stack = [(root, "", "")]
        while stack:
            node, namespace, container = stack.pop()
            namespace = namespace or self._file_namespace
            descend = True
            child_namespace, child_container = namespace, container

            if node.type == "using_directive":
                self._visit_using(node)
                descend = False
            elif node.type in _NAMESPACE_NODES:
                child_namespace = self._visit_namespace(node, namespace)
            elif node.type in _TYPE_NODES:
                declared = self._declare(node, _TYPE_NODES[node.type], namespace, container)
                if declared is not None:
                    child_container = declared
            elif node.type in _MEMBER_NODES:
                self._declare(node, _MEMBER_NODES[node.type], namespace, container)
            elif node.type == "variable_declaration":
                self._visit_variables(node, namespace, container)
            elif node.type == "parameter":
                self._declare(node, self._parameter_kind(node), namespace, container)
            elif node.type in ("constructor_declaration", "destructor_declaration"):
                self._mark_site(name_node(node))
            elif node.type in ("foreach_statement", "catch_declaration", "declaration_expression"):
                self._visit_local_variable(node, namespace, container)
            elif node.type == "type_parameter":
                self._mark_site(name_node(node))
            elif node.type in _LITERAL_KINDS:
                self._visit_literal(node)
            elif node.type == "identifier":
                self._visit_identifier(node)

            if node.type in _METHOD_KINDS:
                self._visit_method(node)

            if descend:
                for child in reversed(node.children):
                    stack.append((child, child_namespace, child_container))
        return self.result

    # -- declarations -------------------------------------------------------

    def _declare(self, node, kind: IdentifierType, namespace: str, container: str,
                 name=None, owner=None) -> Optional[str]:
        name = name if name is not None else name_node(node)
        if name is None or name.type != "identifier":
            return None
        owner = owner if owner is not None else node
        self._mark_site(name)
        text = node_text(name, self.source)
        self.result.declaration_nodes.append(
            DeclarationNode(
                name=text,
                kind=kind,
                line=line_of(name),
                column=column_of(name),
                modifiers=tuple(modifiers_of(owner, self.source)),
                has_attributes=has_attributes(owner),
                is_explicit_interface=any(
                    child.type == "explicit_interface_specifier" for child in owner.children
                ),
                namespace=namespace,
                container=container,
            )
        )
        return text

    def _visit_variables(self, node, namespace: str, container: str) -> None:
        owner = node.parent
        owner_type = owner.type if owner is not None else ""
        if owner_type == "field_declaration":
            # const fields are fields too
            kind = IdentifierType.FIELD
        elif owner_type == "event_field_declaration":
            kind = IdentifierType.EVENT
        else:
            kind = IdentifierType.LOCAL_VARIABLE
            owner = node
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                self._declare(declarator, kind, namespace, container,
                              name=name_node(declarator), owner=owner)

    @staticmethod
    def _parameter_kind(node) -> IdentifierType:
        # positional record parameters become public properties
        parameter_list = node.parent
        owner = parameter_list.parent if parameter_list is not None else None
        if owner is not None and owner.type in ("record_declaration", "record_struct_declaration"):
            return IdentifierType.PROPERTY
        return IdentifierType.PARAMETER

    def _visit_local_variable(self, node, namespace: str, container: str) -> None:
        # foreach (var item in ...), catch (Exception ex), out var value
        if node.type == "foreach_statement":
            if node.child_by_field_name("type") is None:
                return
            name = node.child_by_field_name("left")
        else:
            name = node.child_by_field_name("name")
        if name is not None and name.type == "identifier":
            self._declare(node, IdentifierType.LOCAL_VARIABLE, namespace, container, name=name)

    def _visit_namespace(self, node, namespace: str) -> str:
        name = node.child_by_field_name("name")
        if name is None:
            return namespace
        for part in walk(name):
            if part.type == "identifier":
                self._mark_site(part)
        text = "".join(node_text(name, self.source).split())
        full = f"{namespace}.{text}" if namespace else text
        if node.type == "file_scoped_namespace_declaration":
            self._file_namespace = full
        return full

    # -- imports ------------------------------------------------------------

    def _visit_using(self, node) -> None:
        children = node.children
        is_global = any(child.type == "global" for child in children)
        is_static = any(child.type == "static" for child in children)
        alias_node = None
        if any(child.type == "=" for child in children):
            alias_node = node.child_by_field_name("name")
            if alias_node is None or alias_node.type != "identifier":
                alias_node = next(
                    (
                        ident
                        for child in node.named_children if child.type == "name_equals"
                        for ident in child.named_children if ident.type == "identifier"
                    ),
                    None,
                )

        target = None
        for child in node.named_children:
            if child.type == "name_equals" or child is alias_node:
                continue
            if alias_node is not None and child.start_byte == alias_node.start_byte:
                continue
            target = child
        if target is None:
            return

        self.result.import_nodes.append(
            ImportNode(
                namespace="".join(node_text(target, self.source).split()),
                line=line_of(node),
                alias=node_text(alias_node, self.source) if alias_node is not None else None,
                is_static=is_static,
                is_global=is_global,
            )
        )

    # -- methods, literals, references --------------------------------------

    def _visit_method(self, node) -> None:
        kind = _METHOD_KINDS[node.type]
        name = name_node(node)
        if name is not None and name.type == "identifier":
            text, anchor = node_text(name, self.source), name
        else:
            # operators have no identifier: "operator +", "operator int"
            operator = node.child_by_field_name("operator") or node.child_by_field_name("type")
            suffix = node_text(operator, self.source) if operator is not None else ""
            text, anchor = f"operator {suffix}".strip(), node

        parameters = node.child_by_field_name("parameters")
        parameter_count = 0
        if parameters is not None:
            parameter_count = sum(1 for child in parameters.named_children if child.type == "parameter")

        self.result.method_nodes.append(
            MethodNode(
                name=text.lstrip("@"),
                kind=kind,
                line=line_of(anchor),
                column=column_of(anchor),
                statement_count=count_statements(node.child_by_field_name("body")),
                parameter_count=parameter_count,
            )
        )

    def _visit_literal(self, node) -> None:
        text = node_text(node, self.source)
        anchor = node
        parent = node.parent
        if (
            parent is not None
            and parent.type == "prefix_unary_expression"
            and parent.child_count == 2
            and parent.children[0].type in ("-", "+")
        ):
            if parent.children[0].type == "-":
                text = "-" + text
            anchor = parent
        self.result.literal_nodes.append(
            LiteralNode(
                text=text,
                kind=_LITERAL_KINDS[node.type],
                line=line_of(anchor),
                column=column_of(anchor),
            )
        )

    def _visit_identifier(self, node) -> None:
        if node.start_byte in self._declaration_sites:
            return
        text = node_text(node, self.source).lstrip("@")
        if text:
            self.result.reference_nodes.append(ReferenceNode(name=text, line=line_of(node)))

    def _mark_site(self, node) -> None:
        if node is not None:
            self._declaration_sites.add(node.start_byte)


def count_statements(body) -> int:
    """
    Count statement nodes inside a method body.

    Nested statements count individually; `{ }` blocks are only grouping and
    do not count. Local functions count as one statement and are not entered,
    since they are measured as methods of their own. Expression-bodied
    members (`=> expr;`) count as one statement, bodiless members as zero.
    """
    if body is None:
        return 0
    if body.type == "arrow_expression_clause":
        return 1

    count = 0
    stack = list(body.children)
    while stack:
        node = stack.pop()
        if node.type.endswith("_statement"):
            count += 1
            if node.type == "local_function_statement":
                continue
        stack.extend(node.children)
    return count
