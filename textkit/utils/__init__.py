"""Utility modules for textkit."""

from .string_utils import (
    DEFAULT_CHARSET,
    capitalize,
    to_camel_case,
    to_kebab_case,
    truncate,
    remove_whitespace,
    is_valid_email,
    generate_random_string,
)
from .conversion_utils import (
    num_to_array,
    array_to_num,
    num_to_string,
    string_to_num,
    string_to_array,
    array_to_string,
    num_to_bool,
    bool_to_num,
    string_to_bool,
    bool_to_string,
    array_to_bool,
    bool_to_array,
    num_to_bool_array,
    bool_array_to_num,
    string_to_num_array,
    num_array_to_string,
)
from .logger import get_logger, set_log_level

__all__ = [
    "DEFAULT_CHARSET",
    "capitalize",
    "to_camel_case",
    "to_kebab_case",
    "truncate",
    "remove_whitespace",
    "is_valid_email",
    "generate_random_string",
    "num_to_array",
    "array_to_num",
    "num_to_string",
    "string_to_num",
    "string_to_array",
    "array_to_string",
    "num_to_bool",
    "bool_to_num",
    "string_to_bool",
    "bool_to_string",
    "array_to_bool",
    "bool_to_array",
    "num_to_bool_array",
    "bool_array_to_num",
    "string_to_num_array",
    "num_array_to_string",
    "get_logger",
    "set_log_level",
]
