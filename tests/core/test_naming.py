"""Session and file name validation."""

import pytest

from docchat.core.exceptions import InvalidNameError
from docchat.core.naming import is_valid_name, validate_file_name, validate_name


@pytest.mark.parametrize(
    "name",
    ["Project A", "notes.txt", "Ärger-2024", "report (final).pdf", "a"],
)
def test_valid_names(name: str) -> None:
    assert is_valid_name(name)
    assert validate_name(name) == name


@pytest.mark.parametrize(
    "name",
    [
        "",
        "   ",
        "a/b",
        "a\\b",
        "what?",
        "star*",
        'quote"d',
        "pipe|d",
        "<tag>",
        "c:drive",
        "tab\tname",
        "null\x00byte",
        ".",
        "..",
    ],
)
def test_invalid_names(name: str) -> None:
    assert not is_valid_name(name)
    with pytest.raises(InvalidNameError):
        validate_name(name)


def test_invalid_name_error_carries_name() -> None:
    with pytest.raises(InvalidNameError) as exc_info:
        validate_name("a/b")

    assert exc_info.value.details["name"] == "a/b"
    assert "special characters" in exc_info.value.message


@pytest.mark.parametrize("name", ["index.faiss", "index.pkl", "data.json", "notes.PKL.pkl", ".keep"])
def test_reserved_file_names_are_rejected(name: str) -> None:
    with pytest.raises(InvalidNameError) as exc_info:
        validate_file_name(name)

    assert "reserved" in exc_info.value.message


def test_regular_file_name_is_accepted() -> None:
    assert validate_file_name("report.pdf") == "report.pdf"
