import pytest

from file_verifier.core.value_objects import NonEmptyString


def test_non_empty_string_accepts_valid():
    assert NonEmptyString("README.md").value == "README.md"


def test_non_empty_string_rejects_empty():
    with pytest.raises(ValueError, match="non-empty"):
        NonEmptyString("")


def test_non_empty_string_rejects_whitespace_and_none():
    with pytest.raises(ValueError):
        NonEmptyString("   ")
    with pytest.raises(ValueError):
        NonEmptyString(None)


def test_non_empty_string_equality():
    assert NonEmptyString("a") == NonEmptyString("a")
    assert NonEmptyString("a") != NonEmptyString("b")
