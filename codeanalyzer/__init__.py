"""
CodeAnalyzer: code-quality checks for C# sources.

  from codeanalyzer import find_long_methods
  for method in find_long_methods("src/", threshold=30):
      print(method.declaring_file, method.start_line, method.method_name)
"""

from codeanalyzer.analyzer import (
    CodeAnalyzer,
    check_naming_conventions,
    find_dead_code,
    find_long_methods,
    find_magic_numbers,
)
from codeanalyzer.config import Config
from codeanalyzer.errors import CodeAnalyzerError, ConfigError
from codeanalyzer.utils.metadata import (
    DeadCodeFinding,
    DeadCodeKind,
    IdentifierType,
    MagicNumberFinding,
    MethodInfo,
    NamingConvention,
    NamingViolation,
)

__version__ = "0.1.0"
