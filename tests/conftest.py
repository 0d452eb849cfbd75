import textwrap

import pytest


@pytest.fixture
def write_cs(tmp_path):
    """
    Write a dedented C# source file under tmp_path and return its path.

    Example:
      path = write_cs("Foo.cs", "public class Foo { }")
    """
    def _write(name, source):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


def statements(count, template="Console.WriteLine({i});"):
    """Return `count` statement lines for a method body."""
    return "\n".join(template.format(i=i) for i in range(count))
