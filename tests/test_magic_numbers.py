from codeanalyzer import CodeAnalyzer, Config, find_magic_numbers
from codeanalyzer.rules.magic_numbers import MagicNumberRule

SCREEN = """\
using System.Threading;

public class TestClass
{
    public void TestMethod()
    {
        int width = 1920;
        int height = 1080;
        Thread.Sleep(5000);
        for (int i = 0; i < 2; i++)
        {
            width = width - 1 + i * -1;
        }
    }
}
"""


def test_magic_numbers_are_reported_in_order(write_cs):
    path = write_cs("Screen.cs", SCREEN)
    results = list(find_magic_numbers(path))
    assert [f.value for f in results] == ["1920", "1080", "5000"]
    assert [f.line for f in results] == [7, 8, 9]
    assert results[0].file == str(path)
    assert results[0].context == "int width = 1920;"


def test_common_numbers_are_ignored(write_cs):
    path = write_cs("Common.cs", """\
        public class Common
        {
            public int Pick(int[] values)
            {
                if (values.Length == 0) return -1;
                return values[values.Length - 1] * 2 + values[0] + 0.0 + 1L;
            }
        }
        """)
    assert list(find_magic_numbers(path)) == []


def test_negative_magic_number_keeps_its_sign(write_cs):
    path = write_cs("Neg.cs", """\
        public class Neg
        {
            private double offset = -273.15;
        }
        """)
    assert [f.value for f in find_magic_numbers(path)] == ["-273.15"]


def test_strings_chars_and_bools_are_not_numbers(write_cs):
    path = write_cs("Text.cs", """\
        public class Text
        {
            private string code = "1234";
            private char digit = '7';
            private bool flag = true;
            private object nothing = null;
        }
        """)
    assert list(find_magic_numbers(path)) == []


def test_each_occurrence_is_reported(write_cs):
    path = write_cs("Twice.cs", """\
        public class Twice
        {
            private int a = 42;
            private int b = 42;
        }
        """)
    assert [f.line for f in find_magic_numbers(path)] == [3, 4]


def test_configured_allow_list(write_cs):
    path = write_cs("Screen.cs", SCREEN)
    config = Config(magic_number_allow_list=["-1", "0", "1", "2", "1920", "1080"])
    results = list(CodeAnalyzer(config).find_magic_numbers(path))
    assert [f.value for f in results] == ["5000"]


def test_is_common_compares_numeric_values():
    rule = MagicNumberRule(Config())
    assert rule.is_common("0")
    assert rule.is_common("2.0")
    assert rule.is_common("1u")
    assert rule.is_common("-1")
    assert not rule.is_common("-2")
    assert not rule.is_common("3")


def test_degenerate_paths_yield_nothing(tmp_path):
    assert list(find_magic_numbers(None)) == []
    assert list(find_magic_numbers(str(tmp_path / "Nope.cs"))) == []


def test_directory_under_packages_folder_is_analyzed(write_cs):
    path = write_cs("packages/MyApp/Screen.cs", """\
        public class Screen
        {
            private int width = 1920;
        }
        """)
    assert [f.value for f in find_magic_numbers(path)] == ["1920"]
    assert [f.value for f in find_magic_numbers(path.parent)] == ["1920"]


def test_undecodable_file_does_not_hide_other_findings(tmp_path, write_cs):
    path = write_cs("src/Screen.cs", """\
        public class Screen
        {
            private int height = 1080;
        }
        """)
    (tmp_path / "src" / "Broken.cs").write_bytes(b"\xff\xfe\x00 int x = 42;")
    assert [f.value for f in find_magic_numbers(path.parent)] == ["1080"]
