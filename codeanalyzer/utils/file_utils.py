# codeanalyzer/utils/file_utils.py

"""
Utility functions for file operations in CodeAnalyzer.

Provides helpers for:
  - Normalizing caller-supplied paths (None, empty, PathLike)
  - Reading and writing text files with proper encoding
  - Checking file types against the recognized source extensions
  - Walking a directory tree to list files by extension
  - Ensuring directories exist before writing
"""

import os
from fnmatch import fnmatch
from typing import Iterable, List, Optional


def normalize_path(path) -> Optional[str]:
    """
    Return `path` as a plain string, or None when it is None, blank, or not
    a path-like object at all.

    :param path: str, os.PathLike or None
    :return: Path string or None
    """
    if path is None:
        return None
    try:
        text = os.fspath(path)
    except TypeError:
        return None
    if isinstance(text, bytes):
        text = os.fsdecode(text)
    if not text.strip():
        return None
    return text


def is_source_file(path: str, extensions: Iterable[str]) -> bool:
    """
    Return True if the given path points to an existing file whose name ends
    with one of `extensions` (case-insensitive).

    :param path: File path to check
    :param extensions: Recognized extensions, e.g. [".cs"]
    :return: True if file exists and has a recognized extension
    """
    lowered = path.lower()
    return os.path.isfile(path) and any(lowered.endswith(ext.lower()) for ext in extensions)


def read_text_file(path: str, encoding: str = "utf-8-sig") -> str:
    """
    Read and return the entire contents of a text file.

    The default encoding strips a UTF-8 byte order mark, which Visual Studio
    writes at the start of many source files.

    Raises OSError or UnicodeDecodeError on failure.

    :param path: Path to the text file
    :param encoding: Encoding to use (default: utf-8-sig)
    :return: File contents as a single string
    """
    with open(path, mode="r", encoding=encoding) as f:
        return f.read()


def write_text_file(path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write the given content to a text file, creating parent directories if needed.

    :param path: Path to the output text file
    :param content: String content to write
    :param encoding: Encoding to use (default: utf-8)
    """
    directory = os.path.dirname(path)
    if directory:
        ensure_directory(directory)
    with open(path, mode="w", encoding=encoding) as f:
        f.write(content)


def list_files_with_extensions(
    root_dir: str,
    extensions: Iterable[str],
    recursive: bool = True,
    exclude_patterns: List[str] = None
) -> List[str]:
    """
    Return a sorted list of file paths under `root_dir` that end with one of
    the given extensions. Unreadable directories are skipped silently.

    :param root_dir: Directory to search
    :param extensions: File extensions to match (e.g., [".cs"])
    :param recursive: If True, walk subdirectories; if False, only list top-level files
    :param exclude_patterns: List of glob patterns; any path matching one is skipped
    :return: Sorted list of matching file paths
    """
    if exclude_patterns is None:
        exclude_patterns = []

    exts = tuple(ext.lower() for ext in extensions)
    matches: List[str] = []

    if recursive:
        for dirpath, _, filenames in os.walk(root_dir):
            for fname in filenames:
                if fname.lower().endswith(exts):
                    full_path = os.path.join(dirpath, fname)
                    if not is_excluded(full_path, exclude_patterns, root_dir):
                        matches.append(full_path)
    else:
        try:
            entries = os.listdir(root_dir)
        except OSError:
            entries = []
        for fname in entries:
            full_path = os.path.join(root_dir, fname)
            if os.path.isfile(full_path) and fname.lower().endswith(exts):
                if not is_excluded(full_path, exclude_patterns, root_dir):
                    matches.append(full_path)

    return sorted(matches)


def is_excluded(path: str, patterns: List[str], root: str = None) -> bool:
    """
    Return True if `path` matches any of the globs in `patterns`. Backslashes
    are normalized so Windows-style paths match the same patterns.

    With `root`, only the part of `path` below `root` is matched, as
    "./sub/File.cs", so the directories above the scanned tree never exclude it.

    Example:
      - is_excluded("/src/packages/App/A.cs", ["*/packages/*"], "/src/packages/App") → False
      - is_excluded("/src/App/obj/A.cs", ["*/obj/*"], "/src/App")                   → True

    :param path: File or directory path
    :param patterns: List of glob patterns (e.g., ["*/obj/*", "*.g.cs"])
    :param root: Directory the scan started from
    :return: True if excluded, False otherwise
    """
    if root:
        path = os.path.join(".", os.path.relpath(path, root))
    candidate = path.replace("\\", "/")
    return any(fnmatch(candidate, pat) for pat in patterns)


def ensure_directory(path: str) -> None:
    """
    Ensure that the directory `path` exists. If it does not, create it (recursively).

    :param path: Directory path to create or verify
    """
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
