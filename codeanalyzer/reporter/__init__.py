"""
Report formatters. Each reporter turns a list of findings into a string;
they share the deduplication and the row layout defined here.
"""

from typing import Any, Dict, Iterable, List

ROW_FIELDS = ["check", "file", "line", "identifier", "detail"]


def dedupe_findings(findings: Iterable) -> List:
    """
    Remove duplicate findings, keeping first-seen order. Findings are frozen
    dataclasses, so two findings are duplicates when all their fields match.
    """
    seen = set()
    unique = []
    for f in findings:
        if f in seen:
            continue
        seen.add(f)
        unique.append(f)
    return unique


def finding_row(finding) -> Dict[str, Any]:
    """Flatten any finding into the common check,file,line,identifier,detail row."""
    return {
        "check": finding.check,
        "file": finding.file,
        "line": finding.line,
        "identifier": finding.identifier,
        "detail": finding.describe(),
    }
