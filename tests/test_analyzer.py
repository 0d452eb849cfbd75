import pytest

from codeanalyzer import CodeAnalyzer, Config
from codeanalyzer.utils.metadata import DeadCodeFinding, MagicNumberFinding, MethodInfo, NamingViolation
from codeanalyzer.utils.settings import ALL_CHECKS
from conftest import statements

_BODY = statements(6, "System.Console.WriteLine({i} + 1000);")

SOURCE = f"""\
using System.Text;

public class report
{{
    public static void Main()
    {{
{_BODY}
    }}
}}
"""


def test_all_checks_are_loaded():
    analyzer = CodeAnalyzer(Config())
    assert sorted(analyzer.rules) == sorted(ALL_CHECKS)


def test_analyze_path_runs_every_rule(write_cs):
    path = write_cs("App.cs", SOURCE)
    analyzer = CodeAnalyzer(Config(long_method_threshold=5))
    found = {type(f) for f in analyzer.analyze_path(path)}
    assert found == {MethodInfo, MagicNumberFinding, NamingViolation, DeadCodeFinding}


def test_disabled_rules_are_skipped(write_cs):
    path = write_cs("App.cs", SOURCE)
    config = Config(long_method_threshold=5, disabled_rules=["naming", "dead-code"])
    found = {type(f) for f in CodeAnalyzer(config).analyze_path(path)}
    assert found == {MethodInfo, MagicNumberFinding}


def test_analyze_path_check_selection(write_cs):
    path = write_cs("App.cs", SOURCE)
    results = list(CodeAnalyzer(Config()).analyze_path(path, checks=["naming"]))
    assert [f.identifier for f in results] == ["report"]


def test_unknown_check_is_rejected():
    with pytest.raises(ValueError):
        CodeAnalyzer(Config()).analyze_path("anything", checks=["spelling"])


def test_operations_are_lazy(tmp_path):
    analyzer = CodeAnalyzer(Config())
    results = analyzer.find_magic_numbers(tmp_path)
    (tmp_path / "Late.cs").write_text("class Late { int x = 7; }")
    assert [f.value for f in results] == ["7"]
