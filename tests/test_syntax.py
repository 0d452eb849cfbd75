from codeanalyzer.syntax import ParseFailure, StaticSyntaxTree, build_tree
from codeanalyzer.syntax.csharp import parse_csharp
from codeanalyzer.utils.ast_utils import parse_numeric_literal
from codeanalyzer.utils.metadata import IdentifierType

SAMPLE = """\
using System;
using Gen = System.Collections.Generic;

namespace Demo.App
{
    public class Widget
    {
        private const int Limit = 10;
        private int _count;
        public string Title { get; set; }

        public Widget(int count)
        {
            _count = count;
        }

        public int Area(int width, int height)
        {
            var result = width * height;
            if (result > Limit)
            {
                return -5;
            }
            return result;
        }
    }
}
"""


def _kinds(tree):
    return {(d.name, d.kind) for d in tree.declarations}


def test_parse_csharp_flattens_declarations():
    tree = parse_csharp(SAMPLE, "Widget.cs")
    assert isinstance(tree, StaticSyntaxTree)
    kinds = _kinds(tree)
    assert ("Widget", IdentifierType.CLASS) in kinds
    assert ("Limit", IdentifierType.FIELD) in kinds
    assert ("_count", IdentifierType.FIELD) in kinds
    assert ("Title", IdentifierType.PROPERTY) in kinds
    assert ("Area", IdentifierType.METHOD) in kinds
    assert ("width", IdentifierType.PARAMETER) in kinds
    assert ("result", IdentifierType.LOCAL_VARIABLE) in kinds

    widget = next(d for d in tree.declarations if d.name == "Widget")
    assert widget.namespace == "Demo.App"
    area = next(d for d in tree.declarations if d.name == "Area")
    assert area.container == "Widget"
    assert area.has_modifier("public")


def test_parse_csharp_collects_imports():
    tree = parse_csharp(SAMPLE, "Widget.cs")
    first, second = tree.imports
    assert first.namespace == "System"
    assert first.line == 1
    assert first.alias is None
    assert second.alias == "Gen"
    assert second.namespace == "System.Collections.Generic"
    assert second.last_segment == "Generic"


def test_parse_csharp_method_metrics():
    tree = parse_csharp(SAMPLE, "Widget.cs")
    methods = {m.name: m for m in tree.methods}
    # if-statement, nested return, trailing return, local declaration
    assert methods["Area"].statement_count == 4
    assert methods["Area"].parameter_count == 2
    assert methods["Area"].line == 17
    assert methods["Widget"].kind == "constructor"
    assert methods["Widget"].statement_count == 1


def test_parse_csharp_literals_keep_sign():
    tree = parse_csharp(SAMPLE, "Widget.cs")
    assert [lit.text for lit in tree.literals] == ["10", "-5"]


def test_references_exclude_declaration_sites():
    tree = parse_csharp(SAMPLE, "Widget.cs")
    names = [r.name for r in tree.references]
    assert "Limit" in names
    assert "_count" in names
    assert "Area" not in names
    assert "System" not in names


def test_expression_bodied_and_abstract_members():
    tree = parse_csharp(
        """
        public abstract class Shape
        {
            public abstract double Area();
            public override string ToString() => "shape";
        }
        """,
        "Shape.cs",
    )
    methods = {m.name: m.statement_count for m in tree.methods}
    assert methods == {"Area": 0, "ToString": 1}


def test_syntax_error_is_a_parse_failure():
    result = parse_csharp("public class Broken { void M( { }", "Broken.cs")
    assert isinstance(result, ParseFailure)
    assert not result
    assert result.line >= 1


def test_build_tree_dispatches_by_extension():
    assert isinstance(build_tree("class A { }", "A.cs"), StaticSyntaxTree)
    # unknown extensions fall back to the C# parser
    assert isinstance(build_tree("class A { }", "A.csx"), StaticSyntaxTree)


def test_parse_numeric_literal_forms():
    assert parse_numeric_literal("1920") == 1920
    assert parse_numeric_literal("-1") == -1
    assert parse_numeric_literal("2.0f") == 2
    assert parse_numeric_literal("0x10") == 16
    assert parse_numeric_literal("0b101") == 5
    assert parse_numeric_literal("1_000L") == 1000
    assert parse_numeric_literal("9.99m") == parse_numeric_literal("9.99")
    assert parse_numeric_literal("abc") is None
    assert parse_numeric_literal("") is None


def test_register_builder_plugs_in_another_parser():
    from codeanalyzer import syntax

    def fake(text, path):
        return StaticSyntaxTree(path=path)

    syntax.register_builder(".fake", fake)
    try:
        tree = build_tree("anything at all", "x.FAKE")
        assert isinstance(tree, StaticSyntaxTree)
        assert tree.declarations == []
    finally:
        syntax._BUILDERS.pop(".fake")


def test_builder_exceptions_become_parse_failures():
    from codeanalyzer import syntax

    def explode(text, path):
        raise RuntimeError("boom")

    syntax.register_builder(".boom", explode)
    try:
        result = build_tree("", "x.boom")
        assert isinstance(result, ParseFailure)
        assert "boom" in result.reason
    finally:
        syntax._BUILDERS.pop(".boom")
