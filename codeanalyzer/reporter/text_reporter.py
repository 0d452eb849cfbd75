# codeanalyzer/reporter/text_reporter.py

"""
TextReporter prints one line per finding, grep-friendly:

  path/to/File.cs:12: [magic-numbers] 1920: Magic number 1920 should be a named constant

With `color=True` the location, check name and identifier are colored with
colorama; the summary line at the end counts findings per check.
"""

from collections import Counter
from typing import List

from colorama import Fore, Style

from codeanalyzer.reporter import dedupe_findings, finding_row

_CHECK_COLORS = {
    "long-methods": Fore.YELLOW,
    "magic-numbers": Fore.MAGENTA,
    "naming": Fore.CYAN,
    "dead-code": Fore.RED,
}


class TextReporter:
    def __init__(self, color: bool = False):
        self.color = color

    def _paint(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def format(self, findings: List) -> str:
        lines = []
        counts = Counter()
        for f in dedupe_findings(findings):
            row = finding_row(f)
            counts[row["check"]] += 1
            location = self._paint(f"{row['file']}:{row['line']}", Style.BRIGHT)
            check = self._paint(f"[{row['check']}]", _CHECK_COLORS.get(row["check"], Fore.WHITE))
            lines.append(f"{location}: {check} {row['identifier']}: {row['detail']}")

        if not counts:
            lines.append(self._paint("No findings detected.", Fore.GREEN))
        else:
            summary = ", ".join(f"{name}: {n}" for name, n in sorted(counts.items()))
            lines.append(f"{sum(counts.values())} finding(s) ({summary})")
        return "\n".join(lines)
