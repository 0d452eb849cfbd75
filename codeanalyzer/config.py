"""
Configuration loader for CodeAnalyzer.

Loads settings (disabled_rules, exclude_patterns, thresholds, etc.) from:
  - explicit path via --config, or
  - one of: .codeanalyzer.toml, codeanalyzer.toml,
            .codeanalyzer.yaml/yml, codeanalyzer.yaml/yml,
            pyproject.toml ([tool.codeanalyzer]),
            setup.cfg ([tool:codeanalyzer] or [codeanalyzer]).
"""

import configparser
import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, FrozenSet, List

import toml
import yaml

from codeanalyzer.errors import ConfigError
from codeanalyzer.utils.ast_utils import parse_numeric_literal
from codeanalyzer.utils.settings import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_EXTENSIONS,
    DEFAULT_LONG_METHOD_THRESHOLD,
    DEFAULT_MAGIC_NUMBER_ALLOW_LIST,
)

# Ordered search paths
_CONFIG_FILES = [
    ".codeanalyzer.toml",
    "codeanalyzer.toml",
    ".codeanalyzer.yaml", ".codeanalyzer.yml",
    "codeanalyzer.yaml", "codeanalyzer.yml",
    "pyproject.toml",
    "setup.cfg",
]


@dataclass
class Config:
    disabled_rules: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    long_method_threshold: int = DEFAULT_LONG_METHOD_THRESHOLD
    magic_number_allow_list: List[str] = field(
        default_factory=lambda: list(DEFAULT_MAGIC_NUMBER_ALLOW_LIST)
    )

    def __post_init__(self):
        self.long_method_threshold = validate_threshold(self.long_method_threshold)
        # fail early on an allow-list entry that is not a number
        self.allowed_numbers()

    def allowed_numbers(self) -> FrozenSet[Decimal]:
        """The allow-list as numeric values; raises ConfigError on a malformed entry."""
        values = set()
        for entry in self.magic_number_allow_list:
            value = parse_numeric_literal(entry)
            if value is None:
                raise ConfigError(f"magic_number_allow_list entry is not a number: {entry!r}")
            values.add(value)
        return frozenset(values)

    @classmethod
    def load(cls, path: str = None) -> "Config":
        cfg_path = path or cls._find_config_file(os.getcwd())
        if not cfg_path:
            return cls()
        ext = os.path.splitext(cfg_path)[1].lower()
        try:
            if ext == ".toml":
                raw = toml.load(cfg_path)
                if os.path.basename(cfg_path) == "pyproject.toml":
                    cfg = raw.get("tool", {}).get("codeanalyzer", {})
                else:
                    cfg = raw.get("tool", {}).get("codeanalyzer", raw)
            elif ext in (".yaml", ".yml"):
                with open(cfg_path, "r", encoding="utf-8") as f:
                    cfg = yaml.safe_load(f) or {}
            elif os.path.basename(cfg_path) == "setup.cfg":
                parser = configparser.ConfigParser()
                parser.read(cfg_path)
                if parser.has_section("tool:codeanalyzer"):
                    cfg = dict(parser.items("tool:codeanalyzer"))
                elif parser.has_section("codeanalyzer"):
                    cfg = dict(parser.items("codeanalyzer"))
                else:
                    cfg = {}
            else:
                cfg = {}
        except (OSError, toml.TomlDecodeError, yaml.YAMLError, configparser.Error) as e:
            raise ConfigError(f"cannot read config file {cfg_path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ConfigError(f"config file {cfg_path} does not contain a mapping")
        return cls._from_dict(cfg)

    @staticmethod
    def _find_config_file(start_dir: str) -> str:
        for fname in _CONFIG_FILES:
            candidate = os.path.join(start_dir, fname)
            if os.path.isfile(candidate):
                return candidate
        return ""

    @staticmethod
    def _ensure_list(val: Any) -> List[Any]:
        if val is None:
            return []
        if isinstance(val, list):
            return val
        return [v.strip() for v in str(val).split(",") if v.strip()]

    @classmethod
    def _from_dict(cls, raw: Dict[str, Any]) -> "Config":
        def get(key, default=None):
            for k in raw:
                if k.lower().replace("-", "_") == key:
                    return raw[k]
            return default

        disabled = cls._ensure_list(get("disabled_rules", get("disable_rules", [])))
        exclude = cls._ensure_list(get("exclude_patterns", get("exclude", [])))
        extensions = cls._ensure_list(get("extensions", DEFAULT_EXTENSIONS))
        allow_list = cls._ensure_list(get("magic_number_allow_list", DEFAULT_MAGIC_NUMBER_ALLOW_LIST))
        threshold = get("long_method_threshold", DEFAULT_LONG_METHOD_THRESHOLD)

        if isinstance(threshold, str):
            try:
                threshold = int(threshold.strip())
            except ValueError as e:
                raise ConfigError(f"long_method_threshold is not an integer: {threshold!r}") from e

        return cls(
            disabled_rules=[str(r) for r in disabled],
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS) + [str(p) for p in exclude],
            extensions=[_dotted(str(e)) for e in extensions],
            long_method_threshold=threshold,
            magic_number_allow_list=[str(v) for v in allow_list],
        )


def validate_threshold(threshold: Any) -> int:
    """Return `threshold` if it is a positive int, else raise ConfigError."""
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
        raise ConfigError(f"threshold must be a positive integer, got {threshold!r}")
    return threshold


def _dotted(extension: str) -> str:
    extension = extension.strip()
    return extension if extension.startswith(".") else "." + extension
