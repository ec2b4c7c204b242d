import pytest
from hypothesis import given
from hypothesis import strategies as st

from phonetext.unilib import is_interchange_valid, is_interchange_valid_codepoint
from phonetext.utf8scan import codepoint_count, coerce_to_interchange_valid, decode_at

interchange_text = st.text(
    alphabet=st.characters().filter(lambda ch: is_interchange_valid_codepoint(ord(ch)))
)


@given(st.text())
def test_codepoint_count_matches_text_length(text):
    assert codepoint_count(text.encode("utf-8")) == len(text)


def test_codepoint_count_empty():
    assert codepoint_count(b"") == 0


@given(interchange_text)
def test_coerce_leaves_valid_input_unchanged(text):
    data = text.encode("utf-8")
    assert coerce_to_interchange_valid(data) == data


@given(st.binary())
def test_coerce_output_is_interchange_valid(data):
    result = coerce_to_interchange_valid(data)
    assert is_interchange_valid(result)
    assert len(result) <= len(data)


@given(st.binary())
def test_coerce_is_idempotent(data):
    once = coerce_to_interchange_valid(data)
    assert coerce_to_interchange_valid(once) == once


def test_coerce_replaces_control_character():
    assert coerce_to_interchange_valid(b"a\x01b") == b"a b"


def test_coerce_replaces_non_character_with_one_space():
    assert coerce_to_interchange_valid(b"\xef\xb7\x90") == b" "


def test_coerce_replaces_each_stray_byte():
    assert coerce_to_interchange_valid(bytearray(b"\xff\xfe")) == b"  "


@given(st.text())
def test_decode_at_every_character_start(text):
    data = text.encode("utf-8")
    offset = 0
    for ch in text:
        assert decode_at(data, offset) == ord(ch)
        offset += len(ch.encode("utf-8"))
    assert offset == len(data)


def test_decode_at_out_of_range():
    with pytest.raises(IndexError):
        decode_at(b"abc", 3)
    with pytest.raises(IndexError):
        decode_at(b"abc", -1)


def test_decode_at_truncated_sequence():
    data = "\U0001F600".encode("utf-8")[:3]
    with pytest.raises(ValueError):
        decode_at(data, 0)