"""
String utility functions.
"""

import random
import re
import string

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits

_CAMEL_SEPARATOR_RE = re.compile(r"[-_\s]+(.)?")
_LEADING_UPPER_RE = re.compile(r"^[A-Z]")
_CASE_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATOR_RE = re.compile(r"[\s_]+")
_WHITESPACE_RE = re.compile(r"\s")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def capitalize(text: str) -> str:
    """
    Upper-case the first character of a string.

    Unlike ``str.capitalize`` the rest of the string is left untouched.

    Args:
        text: The string to capitalize

    Returns:
        The string with its first character upper-cased

    Examples:
        >>> capitalize("hello world")
        'Hello world'
    """
    if not text:
        return text
    return text[0].upper() + text[1:]


def to_camel_case(text: str) -> str:
    """
    Convert string to camelCase.

    Runs of hyphens, underscores and whitespace are dropped and the
    character after each run is upper-cased.

    Examples:
        >>> to_camel_case("hello-world")
        'helloWorld'
        >>> to_camel_case("hello world")
        'helloWorld'
    """
    text = _CAMEL_SEPARATOR_RE.sub(
        lambda match: match.group(1).upper() if match.group(1) else "", text
    )
    return _LEADING_UPPER_RE.sub(lambda match: match.group(0).lower(), text)


def to_kebab_case(text: str) -> str:
    """
    Convert string to kebab-case.

    Examples:
        >>> to_kebab_case("helloWorld")
        'hello-world'
        >>> to_kebab_case("Hello World")
        'hello-world'
    """
    # Split lowerUpper boundaries before collapsing separators
    text = _CASE_BOUNDARY_RE.sub(r"\1-\2", text)
    text = _KEBAB_SEPARATOR_RE.sub("-", text)
    return text.lower()


def truncate(text: str, length: int, suffix: str = "...") -> str:
    """
    Truncate a string and append a suffix.

    The suffix is not counted against ``length``, so the result can be
    up to ``length + len(suffix)`` characters long.

    Args:
        text: The string to truncate
        length: Number of characters of ``text`` to keep
        suffix: Appended when the string is cut

    Returns:
        The original string if it fits, otherwise the truncated string

    Examples:
        >>> truncate("Hello world", 5)
        'Hello...'
    """
    if len(text) <= length:
        return text
    return text[:length] + suffix


def remove_whitespace(text: str) -> str:
    """Remove every whitespace character from a string."""
    return _WHITESPACE_RE.sub("", text)


def is_valid_email(email: str) -> bool:
    """
    Check that a string looks like an email address.

    This is a shape check only (``local@domain.tld``), not RFC 5322
    validation.

    Args:
        email: The address to check

    Returns:
        True if the string matches, False otherwise
    """
    return _EMAIL_RE.fullmatch(email) is not None


def generate_random_string(length: int, charset: str = DEFAULT_CHARSET) -> str:
    """
    Generate a random string.

    Characters are drawn uniformly, with replacement, from ``charset``
    using the module-level ``random`` generator. Seed it with
    ``random.seed`` for reproducible output.

    Args:
        length: Number of characters to generate
        charset: Candidate characters (default: ASCII letters and digits)

    Returns:
        A random string of ``length`` characters, or an empty string
        when ``charset`` is empty

    Examples:
        >>> len(generate_random_string(8))
        8
    """
    if not charset:
        logger.debug("Empty charset, returning empty string")
        return ""
    return "".join(random.choice(charset) for _ in range(length))
