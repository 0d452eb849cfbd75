# codeanalyzer/loader.py

"""
Helpers for discovering C# source files and loading them as SourceFile
objects, respecting extension and exclude settings from configuration.

Nothing in here raises for bad input: a None/empty/missing path, an
unreadable file or an undecodable file is logged and skipped.
"""

import glob
import os
from typing import Iterator, List, Optional, Union

from codeanalyzer.config import Config
from codeanalyzer.syntax import ParseFailure, SyntaxTree, build_tree
from codeanalyzer.utils.file_utils import (
    is_excluded,
    is_source_file,
    list_files_with_extensions,
    normalize_path,
    read_text_file,
)
from codeanalyzer.utils.logger import get_logger

LOG = get_logger(__name__)


class SourceFile:
    """
    One source file read from disk.

    Identity is the absolute path. The syntax tree is built on first access
    and cached for the lifetime of the object, which is one analysis call.
    """

    def __init__(self, path: str, text: str):
        self.path = os.path.abspath(path)
        self.text = text
        self._tree: Union[SyntaxTree, ParseFailure, None] = None
        self._lines: Optional[List[str]] = None

    @property
    def tree(self) -> Union[SyntaxTree, ParseFailure]:
        if self._tree is None:
            self._tree = build_tree(self.text, self.path)
        return self._tree

    def line_text(self, line: int) -> str:
        """Stripped text of a 1-based line, or "" when out of range."""
        if self._lines is None:
            self._lines = self.text.splitlines()
        if 1 <= line <= len(self._lines):
            return self._lines[line - 1].strip()
        return ""

    def __eq__(self, other):
        return isinstance(other, SourceFile) and other.path == self.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"SourceFile({self.path!r})"


def load_config(config_path: str = None) -> Config:
    """
    Load CodeAnalyzer configuration from the given path or by discovery.
    """
    LOG.debug("Loading config from %s", config_path)
    return Config.load(config_path)


def load_file(path) -> Optional[SourceFile]:
    """
    Read a single file into a SourceFile.

    :param path: File path (str or PathLike); may be None or empty
    :return: SourceFile, or None if the path is blank, missing or unreadable
    """
    file_path = normalize_path(path)
    if file_path is None:
        LOG.error("load_file: file path is null or empty")
        return None
    if not os.path.isfile(file_path):
        LOG.warning("load_file: file does not exist: %s", file_path)
        return None
    try:
        text = read_text_file(file_path)
    except (OSError, UnicodeDecodeError) as e:
        LOG.warning("load_file: cannot read %s: %s", file_path, e)
        return None
    return SourceFile(file_path, text)


def load_directory(path, config: Config = None) -> Iterator[SourceFile]:
    """
    Yield a SourceFile for every recognized source file under `path`,
    recursively and in sorted path order. Files that fail to read are
    skipped; a blank or missing directory yields nothing.
    """
    dir_path = normalize_path(path)
    if dir_path is None:
        LOG.error("load_directory: directory path is null or empty")
        return
    if not os.path.isdir(dir_path):
        LOG.warning("load_directory: directory does not exist: %s", dir_path)
        return
    for file_path in discover_source_files(dir_path, config):
        source = load_file(file_path)
        if source is not None:
            yield source


def iter_sources(target, config: Config = None) -> Iterator[SourceFile]:
    """
    Yield SourceFiles for a file, a directory, or a glob pattern.

    An explicitly named file is loaded whatever its extension; directories
    and globs are filtered by `config.extensions` and `config.exclude_patterns`.
    """
    path = normalize_path(target)
    if path is None:
        LOG.error("No target given: path is null or empty")
        return
    if os.path.isfile(path):
        source = load_file(path)
        if source is not None:
            yield source
    elif os.path.isdir(path):
        yield from load_directory(path, config)
    elif _is_glob(path):
        for file_path in discover_source_files(path, config):
            source = load_file(file_path)
            if source is not None:
                yield source
    else:
        LOG.warning("Target does not exist: %s", path)


def discover_source_files(target: str, config: Config = None) -> List[str]:
    """
    Return a sorted list of source files under `target`, filtered by
    `config.extensions` and `config.exclude_patterns`.

    :param target: File path, directory, or glob pattern
    :param config: Config specifying extensions and exclude_patterns
    :return: List of file paths to analyze
    """
    config = config or Config()
    excludes = config.exclude_patterns or []
    extensions = config.extensions or []
    LOG.debug("Exclude patterns: %s", excludes)

    if _is_glob(target):
        LOG.debug("Treating target as glob: %s", target)
        root = _glob_root(target)
        paths = glob.glob(target, recursive=True)
    elif os.path.isfile(target):
        LOG.debug("Target is a single file: %s", target)
        root = os.path.dirname(target) or os.curdir
        paths = [target]
    else:
        root = target
        LOG.debug("Walking directory for %s files: %s", extensions, target)
        paths = list_files_with_extensions(target, extensions, recursive=True, exclude_patterns=excludes)

    result = []
    for p in paths:
        if not is_source_file(p, extensions):
            continue
        if is_excluded(p, excludes, root):
            LOG.debug("Excluding path (matched pattern): %s", p)
            continue
        result.append(p)

    LOG.debug("Discovered %d source files", len(result))
    return sorted(result)


def _is_glob(target: str) -> bool:
    return any(c in target for c in ("*", "?", "[")) and not os.path.exists(target)


def _glob_root(pattern: str) -> str:
    # "src/**/*.cs" -> "src"
    parts = []
    for part in pattern.replace("\\", "/").split("/"):
        if any(c in part for c in ("*", "?", "[")):
            break
        parts.append(part)
    if parts == [""]:
        return "/"
    return "/".join(parts) or os.curdir


