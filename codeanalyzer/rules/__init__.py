"""
Check base classes.

A `Rule` inspects one parsed file at a time. A `ProjectRule` needs every
parsed file of a project before it can decide anything. Both expose `run`,
which takes an iterable of SourceFiles and lazily yields findings; parse
failures and per-file errors are logged and skipped inside `run`, so one
bad file never stops a batch.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Tuple

from codeanalyzer.config import Config
from codeanalyzer.syntax import ParseFailure, SyntaxTree
from codeanalyzer.utils.logger import get_logger

LOG = get_logger(__name__)


class Rule(ABC):
    def __init__(self, config: Config = None):
        self.config = config or Config()

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique check identifier (as used by --checks and disabled_rules)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the check reports."""

    @abstractmethod
    def check(self, tree: SyntaxTree, source) -> Iterator:
        """
        Inspect the syntax tree of a single file and yield findings.
        """

    def run(self, sources: Iterable) -> Iterator:
        count = 0
        for source in sources:
            tree = parsed_tree(source)
            if tree is None:
                continue
            try:
                for finding in self.check(tree, source):
                    count += 1
                    LOG.debug("%s: %s:%d %s", self.name, finding.file, finding.line, finding.describe())
                    yield finding
            except Exception as e:
                LOG.error("%s: error analyzing file %s: %s", self.name, source.path, e, exc_info=True)
        LOG.info("%s: found %d issue(s)", self.name, count)


class ProjectRule(Rule):
    """A check that resolves usage across every file before reporting."""

    def check(self, tree: SyntaxTree, source) -> Iterator:
        return self.check_project([(source, tree)])

    @abstractmethod
    def check_project(self, files: List[Tuple[object, SyntaxTree]]) -> Iterator:
        """
        Inspect all parsed files of a project at once and yield findings.
        """

    def run(self, sources: Iterable) -> Iterator:
        files = []
        for source in sources:
            tree = parsed_tree(source)
            if tree is not None:
                files.append((source, tree))
        LOG.debug("%s: %d file(s) parsed", self.name, len(files))

        count = 0
        try:
            for finding in self.check_project(files):
                count += 1
                LOG.debug("%s: %s:%d %s", self.name, finding.file, finding.line, finding.describe())
                yield finding
        except Exception as e:
            LOG.error("%s: error analyzing project: %s", self.name, e, exc_info=True)
        LOG.info("%s: found %d issue(s)", self.name, count)


def parsed_tree(source):
    """
    Return the SyntaxTree of `source`, or None (logged) when it failed to parse.
    """
    try:
        tree = source.tree
    except Exception as e:
        LOG.warning("Cannot parse %s: %s", source.path, e)
        return None
    if isinstance(tree, ParseFailure):
        LOG.warning("Skipping %s: %s at line %d", source.path, tree.reason, tree.line)
        return None
    return tree
