"""
Rule for detecting dead code across a whole project.

Two passes over every parsed file:

  1. Index: collect the names every file references, the types each
     namespace declares and the members each type declares.
  2. Report: per file, `using` directives nothing in the file relies on
     (UnusedImport), then declarations whose name is referenced nowhere in
     the project (UnreferencedDeclaration).

Resolution is by simple name, not by binding. A `using N;` counts as used
when the file references N's last segment, a type the project declares in
N, or a well-known member of N from the .NET table. Same-named
declarations in different places share their references. Both choices can
hide dead code but do not flag live code.

Entry points and members reached from outside the analyzed sources are
never reported: `Main`, overrides, explicit interface implementations and
anything carrying an attribute.
"""

from collections import defaultdict
from typing import Dict, Iterator, List, Set, Tuple

from codeanalyzer.rules import ProjectRule
from codeanalyzer.syntax import DeclarationNode, ImportNode, SyntaxTree
from codeanalyzer.utils.dotnet_namespaces import known_members
from codeanalyzer.utils.logger import get_logger
from codeanalyzer.utils.metadata import DeadCodeFinding, DeadCodeKind, IdentifierType
from codeanalyzer.utils.settings import CHECK_DEAD_CODE

LOG = get_logger(__name__)

TYPE_KINDS = frozenset({
    IdentifierType.CLASS,
    IdentifierType.INTERFACE,
    IdentifierType.STRUCT,
    IdentifierType.ENUM,
    IdentifierType.RECORD,
    IdentifierType.DELEGATE,
})

MEMBER_KINDS = frozenset({
    IdentifierType.METHOD,
    IdentifierType.PROPERTY,
    IdentifierType.EVENT,
    IdentifierType.FIELD,
    IdentifierType.ENUM_MEMBER,
})

_ENTRY_POINTS = frozenset({"Main"})
_ATTRIBUTE_SUFFIX = "Attribute"


class ProjectIndex:
    """Names declared and referenced across every file of one project."""

    def __init__(self):
        self.referenced: Set[str] = set()
        self.types_by_namespace: Dict[str, Set[str]] = defaultdict(set)
        self.members_by_type: Dict[str, Set[str]] = defaultdict(set)

    @classmethod
    def build(cls, trees: List[SyntaxTree]) -> "ProjectIndex":
        index = cls()
        for tree in trees:
            index.referenced.update(reference.name for reference in tree.references)
            for declaration in tree.declarations:
                if declaration.kind in TYPE_KINDS:
                    index.types_by_namespace[declaration.namespace].add(declaration.name)
                elif declaration.kind in MEMBER_KINDS and declaration.container:
                    index.members_by_type[declaration.container].add(declaration.name)
        return index

    def is_referenced(self, name: str) -> bool:
        if name in self.referenced:
            return True
        # [Obsolete] refers to ObsoleteAttribute
        if name.endswith(_ATTRIBUTE_SUFFIX) and len(name) > len(_ATTRIBUTE_SUFFIX):
            return name[:-len(_ATTRIBUTE_SUFFIX)] in self.referenced
        return False

    def import_is_used(self, directive: ImportNode, file_references: Set[str]) -> bool:
        if directive.is_global:
            return True
        if directive.alias:
            return directive.alias in file_references

        segment = directive.last_segment
        if segment in file_references:
            return True

        if directive.is_static:
            members = known_members(directive.namespace) | self.members_by_type.get(segment, set())
            if not members:
                # nothing known about the target type: assume it is used
                return True
            return bool(members & file_references)

        provided = known_members(directive.namespace) | self.types_by_namespace.get(directive.namespace, set())
        return bool(provided & file_references)


def is_dead_code_candidate(declaration: DeclarationNode) -> bool:
    """Return True if an unreferenced `declaration` should be reported."""
    if declaration.kind not in TYPE_KINDS and declaration.kind not in MEMBER_KINDS:
        return False
    if declaration.name in _ENTRY_POINTS:
        return False
    if declaration.has_modifier("override") or declaration.is_explicit_interface:
        return False
    return not declaration.has_attributes


class DeadCodeRule(ProjectRule):
    @property
    def name(self) -> str:
        return CHECK_DEAD_CODE

    @property
    def description(self) -> str:
        return "Unused using directives and declarations never referenced in the project"

    def check_project(self, files: List[Tuple[object, SyntaxTree]]) -> Iterator[DeadCodeFinding]:
        index = ProjectIndex.build([tree for _, tree in files])
        LOG.debug("Indexed %d referenced name(s) across %d file(s)", len(index.referenced), len(files))

        for source, tree in files:
            file_references = {reference.name for reference in tree.references}

            for directive in tree.imports:
                if index.import_is_used(directive, file_references):
                    continue
                yield DeadCodeFinding(
                    kind=DeadCodeKind.UNUSED_IMPORT,
                    identifier=directive.alias or directive.namespace,
                    file=source.path,
                    line=directive.line,
                )

            for declaration in tree.declarations:
                if not is_dead_code_candidate(declaration) or index.is_referenced(declaration.name):
                    continue
                yield DeadCodeFinding(
                    kind=DeadCodeKind.UNREFERENCED_DECLARATION,
                    identifier=declaration.name,
                    file=source.path,
                    line=declaration.line,
                )
