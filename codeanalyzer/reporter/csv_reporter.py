# codeanalyzer/reporter/csv_reporter.py

import csv
import io
from typing import List

from codeanalyzer.reporter import ROW_FIELDS, dedupe_findings, finding_row


class CsvReporter:
    """
    Reporter that outputs findings as CSV. Columns:
      check,file,line,identifier,detail
    Deduplicates so that each finding appears only once.
    """

    @staticmethod
    def format(findings: List) -> str:
        """
        Return a CSV-formatted string containing all unique findings.
        """
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=ROW_FIELDS)
        writer.writeheader()
        for f in dedupe_findings(findings):
            writer.writerow(finding_row(f))

        return output.getvalue()
