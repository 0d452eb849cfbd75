# codeanalyzer/utils/settings.py

"""
Default settings and constants for CodeAnalyzer.

This module centralizes:
  - Default thresholds and the magic-number allow-list
  - Recognized source extensions and default exclude patterns (build output, VCS folders)
  - Default HTML output filename
  - Environment variable names
"""

from typing import List

# -----------------------------------------------------------------------------
# Check thresholds
# -----------------------------------------------------------------------------
DEFAULT_LONG_METHOD_THRESHOLD = 50

# Numeric literals that never count as "magic". Compared by numeric value,
# sign included, so "0.0" or "1L" match as well.
DEFAULT_MAGIC_NUMBER_ALLOW_LIST: List[str] = ["-1", "0", "1", "2"]

# -----------------------------------------------------------------------------
# Source discovery
# -----------------------------------------------------------------------------
DEFAULT_EXTENSIONS: List[str] = [".cs"]

# Globs; paths matching any pattern are skipped during directory walks.
# Users can extend them via config.exclude_patterns
DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    # MSBuild output
    "*/bin/*",
    "*/obj/*",
    # IDE and version control
    "*/.vs/*",
    "*/.git/*",
    "*/.hg/*",
    "*/.svn/*",
    # Restored packages
    "*/packages/*",
    "*/node_modules/*",
    # Generated code
    "*.g.cs",
    "*.g.i.cs",
    "*.Designer.cs",
]

# -----------------------------------------------------------------------------
# Check names, as used by config.disabled_rules and the CLI --checks option
# -----------------------------------------------------------------------------
CHECK_LONG_METHODS = "long-methods"
CHECK_MAGIC_NUMBERS = "magic-numbers"
CHECK_NAMING = "naming"
CHECK_DEAD_CODE = "dead-code"

ALL_CHECKS: List[str] = [CHECK_LONG_METHODS, CHECK_MAGIC_NUMBERS, CHECK_NAMING, CHECK_DEAD_CODE]

# -----------------------------------------------------------------------------
# Default output filename for HTML reports (when user omits -o)
# -----------------------------------------------------------------------------
DEFAULT_HTML_REPORT = "codeanalyzer_report.html"

# -----------------------------------------------------------------------------
# Environment variable names for overriding behavior
# -----------------------------------------------------------------------------
ENV_LOG_LEVEL = "CODEANALYZER_LOG"   # e.g., set to "DEBUG", "INFO", etc.
ENV_DISABLE_COLORS = "CODEANALYZER_NO_COLOR"  # if set, disable terminal colors
