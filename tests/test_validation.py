"""Tests for repository name validation and shell quoting."""

import shutil
import subprocess

import pytest

from slashviberepo.newrepo.validation import escape_single_quotes, is_valid_repo_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("my-awesome-repo", True),
        ("my_awesome_repo", True),
        ("my.awesome.repo", True),
        ("My-Repo_2.0", True),
        ("a" * 100, True),
        ("my repo", False),
        ("my@repo", False),
        ("my/repo", False),
        ("repo\n", False),
        ("répo", False),
        ("", False),
        ("a" * 101, False),
    ],
)
def test_is_valid_repo_name(name, expected):
    assert is_valid_repo_name(name) is expected


class TestEscapeSingleQuotes:
    def test_apostrophe(self):
        assert escape_single_quotes("It's mine") == "It'\\''s mine"

    def test_no_quotes_unchanged(self):
        assert escape_single_quotes("A small tool") == "A small tool"

    def test_every_quote_replaced(self):
        assert escape_single_quotes("''") == "'\\'''\\''"

    @pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
    @pytest.mark.parametrize(
        "value",
        [
            "It's mine",
            "'leading and trailing'",
            "$(rm -rf /) `whoami` $HOME",
            'double "quotes" and \\backslash',
            "semi; colon && pipe | done",
            "",
        ],
    )
    def test_shell_round_trip(self, value):
        """Wrapped in single quotes, the escaped value is one shell word equal to the input."""
        script = f"printf '%s' '{escape_single_quotes(value)}'"
        result = subprocess.run(["sh", "-c", script], capture_output=True, text=True, check=True)
        assert result.stdout == value
