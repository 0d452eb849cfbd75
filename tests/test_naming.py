import pytest

from codeanalyzer import IdentifierType, NamingConvention, check_naming_conventions
from codeanalyzer.rules.naming import (
    is_field_name,
    is_lower_camel_case,
    is_upper_camel_case,
    to_lower_camel_case,
    to_upper_camel_case,
)


def test_well_named_class_has_no_violations(write_cs):
    path = write_cs("TestClass.cs", "public class TestClass { }")
    assert list(check_naming_conventions(path)) == []


def test_lower_case_class_is_reported(write_cs):
    path = write_cs("testClass.cs", "public class testClass { }")
    results = list(check_naming_conventions(path))
    assert len(results) == 1
    violation = results[0]
    assert violation.identifier_name == "testClass"
    assert violation.identifier_type == IdentifierType.CLASS
    assert str(violation.identifier_type) == "Class"
    assert violation.expected_convention == NamingConvention.UPPER_CAMEL_CASE
    assert violation.suggested_name == "TestClass"
    assert violation.line == 1
    assert violation.file == str(path)


def test_each_kind_uses_its_convention(write_cs):
    path = write_cs("Kinds.cs", """\
        public interface iShape { }

        public enum color { red, Green }

        public class Order
        {
            private const int max_items = 10;
            private int _total;
            private int Count;
            public string name { get; set; }

            public void submit(int OrderId)
            {
                var Temp = OrderId;
            }
        }
        """)
    found = {(v.identifier_name, v.identifier_type) for v in check_naming_conventions(path)}
    assert found == {
        ("iShape", IdentifierType.INTERFACE),
        ("color", IdentifierType.ENUM),
        ("red", IdentifierType.ENUM_MEMBER),
        ("max_items", IdentifierType.FIELD),
        ("Count", IdentifierType.FIELD),
        ("name", IdentifierType.PROPERTY),
        ("submit", IdentifierType.METHOD),
        ("OrderId", IdentifierType.PARAMETER),
        ("Temp", IdentifierType.LOCAL_VARIABLE),
    }


def test_const_fields_follow_the_field_convention(write_cs):
    path = write_cs("Retry.cs", """\
        public class Retry
        {
            private const int maxRetries = 3;
            private const int MaxDelay = 5;
            private const int _timeout = 7;
        }
        """)
    found = [
        (v.identifier_name, v.identifier_type, v.expected_convention)
        for v in check_naming_conventions(path)
    ]
    assert found == [("MaxDelay", IdentifierType.FIELD, NamingConvention.LOWER_CAMEL_CASE)]


def test_violations_come_in_declaration_order(write_cs):
    path = write_cs("Order.cs", """\
        public class bad
        {
            public void worse() { }
        }
        """)
    assert [v.identifier_name for v in check_naming_conventions(path)] == ["bad", "worse"]


def test_message_names_kind_and_convention(write_cs):
    path = write_cs("Local.cs", """\
        public class Local
        {
            public void Run()
            {
                int Value = 1;
            }
        }
        """)
    (violation,) = check_naming_conventions(path)
    assert violation.message == "Local variable names should use LowerCamelCase"
    assert violation.suggested_name == "value"


@pytest.mark.parametrize("name,upper,lower", [
    ("TestClass", True, False),
    ("testClass", False, True),
    ("Test_Class", False, False),
    ("X", True, False),
    ("", False, False),
])
def test_case_predicates(name, upper, lower):
    assert is_upper_camel_case(name) is upper
    assert is_lower_camel_case(name) is lower


def test_field_names_allow_one_leading_underscore():
    assert is_field_name("_count")
    assert is_field_name("count")
    assert not is_field_name("_Count")
    assert not is_field_name("my_count")


def test_suggestions():
    assert to_upper_camel_case("test_class") == "TestClass"
    assert to_upper_camel_case("testClass") == "TestClass"
    assert to_lower_camel_case("MaxValue") == "maxValue"
    assert to_lower_camel_case("max_value") == "maxValue"
