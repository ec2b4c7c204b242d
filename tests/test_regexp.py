import pytest
from hypothesis import given
from hypothesis import strategies as st

from phonetext.regexp import PythonRegExp, RegExp, RegExpFactory, RegExpInput


@pytest.fixture
def factory():
    return RegExpFactory()


def test_input_str_is_remaining_text():
    text_input = RegExpInput("+1 650")
    assert str(text_input) == "+1 650"
    assert text_input.consumed == ""


def test_consume_anchored_advances(factory):
    regexp = factory.create_regexp(r"(\d+)")
    text_input = factory.create_input("123abc")
    assert regexp.consume(text_input) == ("123",)
    assert str(text_input) == "abc"
    assert text_input.consumed == "123"


def test_consume_anchored_fails_when_not_at_start(factory):
    regexp = factory.create_regexp(r"\d+")
    text_input = factory.create_input("abc123")
    assert regexp.consume(text_input) is None
    assert str(text_input) == "abc123"


def test_find_and_consume_skips_ahead(factory):
    regexp = factory.create_regexp(r"(\d+)")
    text_input = factory.create_input("abc123def")
    assert regexp.find_and_consume(text_input) == ("123",)
    assert str(text_input) == "def"


def test_consume_unanchored_via_flag(factory):
    regexp = factory.create_regexp(r"(\d+)")
    text_input = factory.create_input("abc123def")
    assert regexp.consume(text_input, anchor_at_start=False) == ("123",)
    assert str(text_input) == "def"


def test_consume_repeatedly_until_exhausted(factory):
    regexp = factory.create_regexp("ab")
    text_input = factory.create_input("abab")
    assert regexp.consume(text_input) == ()
    assert str(text_input) == "ab"
    assert regexp.consume(text_input) == ()
    assert str(text_input) == ""
    assert regexp.consume(text_input) is None


def test_consume_several_groups(factory):
    regexp = factory.create_regexp(r"(\d)(\d)(\d)")
    text_input = factory.create_input("12345")
    assert regexp.consume(text_input) == ("1", "2", "3")
    assert str(text_input) == "45"


def test_consume_unmatched_group_is_empty(factory):
    regexp = factory.create_regexp(r"(a)?(b)")
    text_input = factory.create_input("b")
    assert regexp.consume(text_input) == ("", "b")


def test_full_match(factory):
    regexp = factory.create_regexp(r"\d+")
    assert regexp.full_match("123") == "123"
    assert regexp.full_match("123a") is None


def test_partial_match(factory):
    regexp = factory.create_regexp(r"\d+")
    assert regexp.partial_match("a123b") == "123"
    assert regexp.partial_match("abc") is None


def test_match_returns_first_group(factory):
    regexp = factory.create_regexp(r"a(\d+)b")
    assert regexp.partial_match("xxa12bxx") == "12"
    assert regexp.full_match("xxa12bxx") is None
    assert regexp.match("a12b", full_match=True) == "12"


def test_replace_first_only(factory):
    regexp = factory.create_regexp("-")
    result = regexp.replace("1-2-3", " ")
    assert result.count(" ") == 1
    assert result.startswith("1 ")
    assert result.replace(" ", "-") == "1-2-3"


def test_global_replace_all(factory):
    regexp = factory.create_regexp("-")
    result = regexp.global_replace("1-2-3", " ")
    assert "-" not in result
    assert result.split(" ") == ["1", "2", "3"]


def test_replace_with_group_references(factory):
    regexp = factory.create_regexp(r"(\d{3})(\d{4})")
    result = regexp.replace("5551234", "$1-$2")
    assert result.split("-") == ["555", "1234"]


def test_replace_whole_match_reference(factory):
    regexp = factory.create_regexp(r"\d+")
    result = regexp.global_replace("a1b22", "[$0]")
    assert result == "a[1]b[22]"


def test_replace_without_match_returns_none(factory):
    regexp = factory.create_regexp(r"\d")
    assert regexp.replace("abc", "x") is None
    assert regexp.global_replace("abc", "x") is None


def test_replace_with_missing_group_raises(factory):
    regexp = factory.create_regexp("(a)")
    with pytest.raises(ValueError):
        regexp.replace("a", "$2")


def test_invalid_pattern_raises(factory):
    with pytest.raises(ValueError):
        factory.create_regexp("(unclosed")


def test_abstract_regexp_cannot_be_instantiated():
    with pytest.raises(TypeError):
        RegExp()


def test_factory_creates_python_regexp(factory):
    regexp = factory.create_regexp("x")
    assert isinstance(regexp, PythonRegExp)
    assert regexp.pattern == "x"


@given(st.text(alphabet="0123456789", max_size=20))
def test_digits_fully_match_digit_pattern(text):
    regexp = PythonRegExp(r"\d*")
    assert regexp.full_match(text) == text


@given(st.text(alphabet="ab-", max_size=30))
def test_global_replace_literal_agrees_with_str_replace(text):
    regexp = PythonRegExp("-")
    result = regexp.global_replace(text, "+")
    if "-" in text:
        assert result == text.replace("-", "+")
    else:
        assert result is None


@given(st.text(alphabet="0123456789ab", max_size=30))
def test_consumed_plus_remaining_is_original(text):
    regexp = PythonRegExp(r"\d+")
    text_input = RegExpInput(text)
    while regexp.find_and_consume(text_input) is not None:
        pass
    assert text_input.consumed + text_input.remaining == text
    assert regexp.partial_match(text_input.remaining) is None