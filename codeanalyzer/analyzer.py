# codeanalyzer/analyzer.py

"""
Core Analyzer: dynamically loads all Rule subclasses from codeanalyzer.rules,
loads source files, and applies each rule to produce findings.

The public entry points (`find_long_methods`, `find_magic_numbers`,
`check_naming_conventions`, `find_dead_code`) validate their arguments
when called and return lazy iterators; nothing is read from disk until the
caller starts iterating.
"""

import importlib
import inspect
import os
import pkgutil
from typing import Dict, Iterable, Iterator

from codeanalyzer.config import Config
from codeanalyzer.loader import iter_sources
from codeanalyzer.rules import Rule
from codeanalyzer.rules.long_methods import LongMethodRule
from codeanalyzer.utils.logger import get_logger
from codeanalyzer.utils.metadata import DeadCodeFinding, MagicNumberFinding, MethodInfo, NamingViolation
from codeanalyzer.utils.settings import (
    CHECK_DEAD_CODE,
    CHECK_LONG_METHODS,
    CHECK_MAGIC_NUMBERS,
    CHECK_NAMING,
    DEFAULT_LONG_METHOD_THRESHOLD,
)

LOG = get_logger(__name__)


class CodeAnalyzer:
    def __init__(self, config: Config = None):
        """
        :param config: CodeAnalyzer Config (thresholds, exclude patterns, etc.)
        """
        self.config = config or Config.load()
        LOG.debug("Initializing CodeAnalyzer with config: %s", self.config)
        self.rules: Dict[str, Rule] = self._load_rules()

    def _load_rules(self) -> Dict[str, Rule]:
        """
        Walk the codeanalyzer.rules package, import every module, and
        instantiate each concrete Rule subclass defined there.
        """
        rules: Dict[str, Rule] = {}
        rules_pkg = "codeanalyzer.rules"
        rules_path = os.path.join(os.path.dirname(__file__), "rules")

        for _, full_name, is_pkg in pkgutil.walk_packages([rules_path], prefix=rules_pkg + "."):
            if is_pkg:
                continue
            LOG.debug("Importing rules module: %s", full_name)
            module = importlib.import_module(full_name)
            for obj in vars(module).values():
                if (
                    isinstance(obj, type)
                    and issubclass(obj, Rule)
                    and not inspect.isabstract(obj)
                    and obj.__module__ == module.__name__
                ):
                    rule_instance = obj(self.config)
                    rules[rule_instance.name] = rule_instance
                    LOG.debug("Loaded rule: %s", rule_instance.name)

        LOG.info("Total rules loaded: %d", len(rules))
        return rules

    def find_long_methods(self, path, threshold: int = None) -> Iterator[MethodInfo]:
        """
        Methods whose statement count reaches `threshold`.

        :param path: Source file or directory
        :param threshold: Minimum statement count to report; defaults to the
                          configured long_method_threshold
        :return: Iterator of MethodInfo
        :raises ValueError: if threshold is not a positive integer
        """
        if threshold is None:
            rule = self.rules[CHECK_LONG_METHODS]
        else:
            rule = LongMethodRule(self.config, threshold)
        return rule.run(iter_sources(path, self.config))

    def find_magic_numbers(self, path) -> Iterator[MagicNumberFinding]:
        return self.rules[CHECK_MAGIC_NUMBERS].run(iter_sources(path, self.config))

    def check_naming_conventions(self, path) -> Iterator[NamingViolation]:
        return self.rules[CHECK_NAMING].run(iter_sources(path, self.config))

    def find_dead_code(self, directory_path) -> Iterator[DeadCodeFinding]:
        """
        Unused imports and unreferenced declarations, resolved across every
        source file under `directory_path` (a single file is its own project).
        """
        return self.rules[CHECK_DEAD_CODE].run(iter_sources(directory_path, self.config))

    def enabled_rules(self, checks: Iterable[str] = None) -> Dict[str, Rule]:
        """
        Rules to run: all loaded rules (or only `checks`), minus disabled_rules.
        """
        wanted = set(checks) if checks is not None else set(self.rules)
        unknown = wanted - set(self.rules)
        if unknown:
            raise ValueError(f"unknown check(s): {', '.join(sorted(unknown))}")
        disabled = set(self.config.disabled_rules)
        if disabled:
            LOG.info("Skipping disabled rules: %s", sorted(disabled))
        return {name: rule for name, rule in self.rules.items() if name in wanted and name not in disabled}

    def analyze_path(self, target, checks: Iterable[str] = None) -> Iterator:
        """
        Run every enabled rule over `target` (file, dir, or glob) and yield
        all findings, rule by rule.
        """
        rules = self.enabled_rules(checks)
        return self._analyze(target, rules)

    def _analyze(self, target, rules: Dict[str, Rule]) -> Iterator:
        LOG.info("Starting analysis on target: %s", target)
        # load once so every rule shares the cached syntax trees
        sources = list(iter_sources(target, self.config))
        LOG.info("Discovered %d files to analyze", len(sources))
        for rule in rules.values():
            yield from rule.run(sources)
        LOG.info("Finished analysis on target: %s", target)


def find_long_methods(path, threshold: int = DEFAULT_LONG_METHOD_THRESHOLD) -> Iterator[MethodInfo]:
    """
    Find methods with `threshold` or more statements.

    Example:
      for method in find_long_methods("src/", threshold=30):
          print(method.method_name, method.statement_count)
    """
    return CodeAnalyzer(Config()).find_long_methods(path, threshold)


def find_magic_numbers(path) -> Iterator[MagicNumberFinding]:
    """Find numeric literals outside the allow-list (-1, 0, 1, 2)."""
    return CodeAnalyzer(Config()).find_magic_numbers(path)


def check_naming_conventions(path) -> Iterator[NamingViolation]:
    """Find declarations whose names break the casing rule for their kind."""
    return CodeAnalyzer(Config()).check_naming_conventions(path)


def find_dead_code(directory_path) -> Iterator[DeadCodeFinding]:
    """Find unused imports and unreferenced declarations across a project."""
    return CodeAnalyzer(Config()).find_dead_code(directory_path)
