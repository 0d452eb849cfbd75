# codeanalyzer/reporter/json_reporter.py

import json
from typing import Any, Dict, List

from codeanalyzer.reporter import dedupe_findings


class JSONReporter:
    """
    Reporter that outputs findings as a JSON array. Automatically removes
    duplicate findings. Each entry carries the check name plus every field
    of the finding record (enums as their string values).
    """

    @staticmethod
    def format(findings: List) -> str:
        """
        Return JSON string for the list of findings, after removing duplicates.
        """
        output_list: List[Dict[str, Any]] = []
        for f in dedupe_findings(findings):
            output_list.append({"check": f.check, **f.to_dict()})

        return json.dumps(output_list, indent=2)
