import pytest

from codeanalyzer import CodeAnalyzer, Config, ConfigError, find_long_methods
from conftest import statements


def _class_with(body_statements, name="TestMethod"):
    return f"""
using System;

public class TestClass
{{
    public void {name}(int a, int b)
    {{
{body_statements}
    }}

    public void ShortMethod()
    {{
        Console.WriteLine("short");
        Console.WriteLine("method");
        return;
    }}
}}
"""


def test_long_method_is_reported(write_cs):
    path = write_cs("Long.cs", _class_with(statements(51)))
    results = list(find_long_methods(path, threshold=50))
    assert len(results) == 1
    method = results[0]
    assert method.method_name == "TestMethod"
    assert method.statement_count == 51
    assert method.parameter_count == 2
    assert method.declaring_file == str(path)
    assert method.start_line == 6


def test_short_methods_are_not_reported(write_cs):
    path = write_cs("Short.cs", _class_with(statements(3)))
    assert list(find_long_methods(path)) == []


def test_threshold_boundary_is_inclusive(write_cs):
    path = write_cs("Edge.cs", _class_with(statements(10)))
    assert [m.method_name for m in find_long_methods(path, threshold=10)] == ["TestMethod"]
    assert list(find_long_methods(path, threshold=11)) == []


def test_raising_threshold_never_adds_results(write_cs):
    path = write_cs("Mono.cs", _class_with(statements(20)))
    counts = [len(list(find_long_methods(path, threshold=t))) for t in (1, 3, 4, 20, 21, 100)]
    assert counts == sorted(counts, reverse=True)
    assert counts[0] == 2


def test_blank_lines_and_comments_do_not_count(write_cs):
    body = "\n\n        // comment\n\n".join(statements(5).splitlines())
    path = write_cs("Sparse.cs", _class_with(body))
    assert [m.statement_count for m in find_long_methods(path, threshold=5)] == [5]


@pytest.mark.parametrize("threshold", [0, -3, "50", 2.5, True])
def test_invalid_threshold_raises_on_call(threshold, write_cs):
    path = write_cs("Any.cs", _class_with(statements(1)))
    with pytest.raises(ValueError):
        find_long_methods(path, threshold=threshold)


def test_invalid_threshold_is_a_config_error():
    with pytest.raises(ConfigError):
        Config(long_method_threshold=0)


def test_degenerate_paths_yield_nothing(tmp_path):
    assert list(find_long_methods(None)) == []
    assert list(find_long_methods("")) == []
    assert list(find_long_methods(tmp_path / "missing")) == []


def test_directory_results_follow_file_order(write_cs):
    write_cs("proj/B.cs", _class_with(statements(6), name="InB"))
    path = write_cs("proj/A.cs", _class_with(statements(6), name="InA"))
    names = [m.method_name for m in find_long_methods(path.parent, threshold=5)]
    assert names == ["InA", "InB"]


def test_malformed_file_is_skipped(write_cs):
    write_cs("proj/Broken.cs", "public class Broken { void M( { }")
    path = write_cs("proj/Good.cs", _class_with(statements(6)))
    results = list(find_long_methods(path.parent, threshold=5))
    assert [m.declaring_file for m in results] == [str(path)]


def test_configured_threshold_is_the_default(write_cs):
    path = write_cs("Cfg.cs", _class_with(statements(7)))
    analyzer = CodeAnalyzer(Config(long_method_threshold=7))
    assert len(list(analyzer.find_long_methods(path))) == 1


def test_repeated_calls_give_identical_results(write_cs):
    path = write_cs("Same.cs", _class_with(statements(12)))
    assert list(find_long_methods(path, threshold=5)) == list(find_long_methods(path, threshold=5))
