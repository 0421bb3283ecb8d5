"""
textkit: small string formatting and primitive type conversion helpers.

Every helper is importable directly from this package and is also
available on the ``textkit`` aggregate object.
"""

from .utils.string_utils import (
    DEFAULT_CHARSET,
    capitalize,
    to_camel_case,
    to_kebab_case,
    truncate,
    remove_whitespace,
    is_valid_email,
    generate_random_string,
)
from .utils.conversion_utils import (
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
from .toolkit import TextKit, textkit

__version__ = "1.0.0"

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
    "TextKit",
    "textkit",
]
