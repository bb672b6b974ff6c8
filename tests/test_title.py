import pytest

from nomadpack.title import title


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello", "Hello"),
        ("hello world", "Hello World"),
    ],
)
def test_title_source_cases(text, expected):
    assert title(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hELLO wORLD", "Hello World"),
        ("don't stop", "Don't Stop"),
        ("", ""),
        ("  spaced  out ", "  Spaced  Out "),
    ],
)
def test_title_more_cases(text, expected):
    assert title(text) == expected


def test_title_is_idempotent():
    once = title("some mixed CASE words")
    assert title(once) == once