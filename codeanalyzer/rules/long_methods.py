"""
Rule for detecting overly long methods.

The size of a method is the number of statements in its body, not its
physical line count, so blank lines, comments, braces and formatting style
have no influence. A method is reported when its statement count reaches
the threshold (default 50); shorter methods produce nothing.
"""

from typing import Iterator

from codeanalyzer.config import Config, validate_threshold
from codeanalyzer.rules import Rule
from codeanalyzer.syntax import SyntaxTree
from codeanalyzer.utils.metadata import MethodInfo
from codeanalyzer.utils.settings import CHECK_LONG_METHODS


class LongMethodRule(Rule):
    def __init__(self, config: Config = None, threshold: int = None):
        super().__init__(config)
        if threshold is None:
            threshold = self.config.long_method_threshold
        self.threshold = validate_threshold(threshold)

    @property
    def name(self) -> str:
        return CHECK_LONG_METHODS

    @property
    def description(self) -> str:
        return f"Methods with {self.threshold} or more statements"

    def check(self, tree: SyntaxTree, source) -> Iterator[MethodInfo]:
        for method in tree.methods:
            if method.statement_count < self.threshold:
                continue
            yield MethodInfo(
                method_name=method.name,
                declaring_file=source.path,
                start_line=method.line,
                statement_count=method.statement_count,
                parameter_count=method.parameter_count,
            )
