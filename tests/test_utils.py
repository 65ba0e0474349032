import pytest

from scaletype.utils import is_rust_identifier


@pytest.mark.parametrize(
    "text",
    ["hello", "Hello", "World", "_", "Planet", "a1", "_private_2", "TupleStruct"],
)
def test_valid_identifiers(text):
    assert is_rust_identifier(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "1", ", World!", "::world", "hello$!@$", "9lives", "has space", "dash-ed"],
)
def test_invalid_identifiers(text):
    assert is_rust_identifier(text) is False


def test_non_ascii_is_rejected():
    assert is_rust_identifier("h\u00e9llo") is False


def test_digits_allowed_only_after_head():
    assert is_rust_identifier("u8") is True
    assert is_rust_identifier("8u") is False