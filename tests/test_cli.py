import json

import pytest

from codeanalyzer.cli import main

SOURCE = """\
using System.Linq;

public class Screen
{
    public static void Main()
    {
        System.Console.WriteLine(1920);
    }
}
"""


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        main(["--no-banner"] + argv)
    return exc.value.code


def test_json_report_to_stdout(write_cs, capsys):
    path = write_cs("Screen.cs", SOURCE)
    assert _run([str(path), "-f", "json", "--checks", "magic-numbers"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [entry["value"] for entry in data] == ["1920"]


def test_fail_on_findings_sets_exit_status(write_cs):
    path = write_cs("Screen.cs", SOURCE)
    assert _run([str(path), "--checks", "dead-code", "--fail-on-findings"]) == 1
    assert _run([str(path), "--checks", "long-methods", "--fail-on-findings"]) == 0


def test_report_written_to_output_file(write_cs, tmp_path):
    path = write_cs("Screen.cs", SOURCE)
    out = tmp_path / "reports" / "result.csv"
    assert _run([str(path), "-f", "csv", "-o", str(out)]) == 0
    assert out.read_text().startswith("check,file,line,identifier,detail")


def test_threshold_option(write_cs, capsys):
    path = write_cs("Screen.cs", SOURCE)
    assert _run([str(path), "-f", "json", "--checks", "long-methods", "--threshold", "1"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [entry["method_name"] for entry in data] == ["Main"]


@pytest.mark.parametrize("argv", [
    ["--checks", "spelling"],
    ["--threshold", "0"],
    ["-f", "xml"],
])
def test_usage_errors_exit_with_2(argv, write_cs):
    path = write_cs("Screen.cs", SOURCE)
    assert _run([str(path)] + argv) == 2


def test_missing_target_is_a_usage_error(tmp_path):
    assert _run([str(tmp_path / "nowhere")]) == 2
