"""
Tests for the string helpers in textkit.utils.string_utils.
"""

import random
import re

import pytest

from textkit import (
    DEFAULT_CHARSET,
    capitalize,
    to_camel_case,
    to_kebab_case,
    truncate,
    remove_whitespace,
    is_valid_email,
    generate_random_string,
)


@pytest.fixture
def restore_random_state():
    state = random.getstate()
    yield
    random.setstate(state)


class TestCapitalize:
    """Test first-letter capitalization."""

    def test_capitalizes_first_letter(self):
        assert capitalize("hello") == "Hello"
        assert capitalize("hello world") == "Hello world"

    def test_empty_string(self):
        assert capitalize("") == ""

    def test_single_character(self):
        assert capitalize("a") == "A"

    def test_rest_of_string_untouched(self):
        """Only the first character changes, unlike str.capitalize."""
        assert capitalize("hELLO") == "HELLO"

    @pytest.mark.parametrize("text", ["", "a", "hello", "Hello", "1abc", " x"])
    def test_idempotent(self, text):
        assert capitalize(capitalize(text)) == capitalize(text)


class TestToCamelCase:
    """Test camelCase conversion."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello world", "helloWorld"),
            ("hello-world", "helloWorld"),
            ("hello_world", "helloWorld"),
            ("helloWorld", "helloWorld"),
            ("Hello World", "helloWorld"),
            ("foo--bar__baz", "fooBarBaz"),
        ],
    )
    def test_converts(self, text, expected):
        assert to_camel_case(text) == expected

    def test_trailing_separator_dropped(self):
        assert to_camel_case("hello-") == "hello"

    def test_empty_string(self):
        assert to_camel_case("") == ""


class TestToKebabCase:
    """Test kebab-case conversion."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("helloWorld", "hello-world"),
            ("Hello World", "hello-world"),
            ("hello_world", "hello-world"),
            ("hello   world", "hello-world"),
            ("already-kebab", "already-kebab"),
        ],
    )
    def test_converts(self, text, expected):
        assert to_kebab_case(text) == expected


class TestTruncate:
    """Test truncation with a suffix."""

    def test_truncates_with_default_suffix(self):
        assert truncate("Hello world", 5) == "Hello..."
        assert truncate("Hello world", 5, "...") == "Hello..."

    def test_short_string_unchanged(self):
        assert truncate("Hi", 5) == "Hi"

    def test_exact_length_unchanged(self):
        assert truncate("Hello", 5) == "Hello"

    def test_custom_suffix(self):
        assert truncate("Hello world", 5, "---") == "Hello---"

    @pytest.mark.parametrize("length", [0, 1, 3, 11, 20])
    def test_length_bound(self, length):
        text = "Hello world"
        result = truncate(text, length, "~~")
        assert len(result) <= length + 2
        if len(text) <= length:
            assert result == text


class TestRemoveWhitespace:
    """Test whitespace removal."""

    def test_removes_spaces(self):
        assert remove_whitespace("hello world") == "helloworld"
        assert remove_whitespace("  hello   world  ") == "helloworld"

    def test_removes_tabs_and_newlines(self):
        assert remove_whitespace("a\tb\nc\r\nd") == "abcd"


class TestIsValidEmail:
    """Test email shape validation."""

    @pytest.mark.parametrize(
        "email",
        ["test@example.com", "user.name@domain.co.uk", "a@b.c"],
    )
    def test_accepts_valid(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "invalid-email",
            "test@",
            "@example.com",
            "",
            "a@b",
            "a b@c.d",
            "a@@b.c",
            "a@b.c\n",
        ],
    )
    def test_rejects_invalid(self, email):
        assert is_valid_email(email) is False


class TestGenerateRandomString:
    """Test random string generation."""

    @pytest.mark.parametrize("length", [0, 1, 8, 10, 64])
    def test_length(self, length):
        assert len(generate_random_string(length)) == length

    def test_successive_calls_differ(self):
        assert generate_random_string(10) != generate_random_string(10)

    def test_default_charset(self):
        assert len(DEFAULT_CHARSET) == 62
        assert set(generate_random_string(200)) <= set(DEFAULT_CHARSET)

    def test_custom_charset(self):
        assert re.fullmatch(r"[0-9]{5}", generate_random_string(5, "0123456789"))

    def test_empty_charset(self):
        assert generate_random_string(5, "") == ""

    def test_negative_length(self):
        assert generate_random_string(-3) == ""

    def test_reproducible_with_seed(self, restore_random_state):
        random.seed(1234)
        first = generate_random_string(16)
        random.seed(1234)
        assert generate_random_string(16) == first
