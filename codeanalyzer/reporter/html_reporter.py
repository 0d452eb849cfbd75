# codeanalyzer/reporter/html_reporter.py

"""
HtmlReporter formats findings into a simple HTML report. It deduplicates
findings and renders them in one table, with a per-check count above it.
"""

from collections import Counter
from html import escape
from typing import List

from codeanalyzer.reporter import ROW_FIELDS, dedupe_findings, finding_row


class HtmlReporter:
    def format(self, findings: List) -> str:
        """
        Return an HTML string containing all deduplicated findings in a table.
        """
        rows = [finding_row(f) for f in dedupe_findings(findings)]

        style = """
        <style>
          body {
            font-family: Arial, sans-serif;
            margin: 20px;
          }
          table {
            border-collapse: collapse;
            width: 100%;
          }
          th, td {
            border: 1px solid #ddd;
            padding: 8px;
          }
          th {
            background-color: #f2f2f2;
            text-align: left;
          }
          tr:nth-child(even) {
            background-color: #f9f9f9;
          }
          tr:hover {
            background-color: #e9e9e9;
          }
          .check {
            font-weight: bold;
          }
        </style>
        """

        html_parts = [
            "<!DOCTYPE html>",
            "<html lang=\"en\">",
            "<head>",
            "  <meta charset=\"UTF-8\">",
            "  <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\">",
            "  <title>CodeAnalyzer Report</title>",
            style,
            "</head>",
            "<body>",
            "  <h1>CodeAnalyzer Findings</h1>",
        ]

        if not rows:
            html_parts.append("  <p>No findings detected.</p>")
        else:
            counts = Counter(row["check"] for row in rows)
            html_parts.append("  <ul>")
            for name, n in sorted(counts.items()):
                html_parts.append(f"    <li>{escape(name)}: {n}</li>")
            html_parts.append("  </ul>")

            html_parts.append("  <table>")
            html_parts.append("    <tr>")
            for column in ROW_FIELDS:
                html_parts.append(f"      <th>{column.capitalize()}</th>")
            html_parts.append("    </tr>")

            for row in rows:
                html_parts.append("    <tr>")
                html_parts.append(f"      <td class=\"check\">{escape(row['check'])}</td>")
                html_parts.append(f"      <td>{escape(row['file'])}</td>")
                html_parts.append(f"      <td>{row['line']}</td>")
                html_parts.append(f"      <td>{escape(row['identifier'])}</td>")
                html_parts.append(f"      <td>{escape(row['detail'])}</td>")
                html_parts.append("    </tr>")

            html_parts.append("  </table>")

        html_parts.append("</body>")
        html_parts.append("</html>")

        return "\n".join(html_parts)
