"""
Aggregate object exposing every helper as an attribute.
"""

from typing import Callable, Dict

from .utils import string_utils, conversion_utils


class TextKit:
    """All string and conversion helpers on a single object."""

    # String helpers
    capitalize = staticmethod(string_utils.capitalize)
    to_camel_case = staticmethod(string_utils.to_camel_case)
    to_kebab_case = staticmethod(string_utils.to_kebab_case)
    truncate = staticmethod(string_utils.truncate)
    remove_whitespace = staticmethod(string_utils.remove_whitespace)
    is_valid_email = staticmethod(string_utils.is_valid_email)
    generate_random_string = staticmethod(string_utils.generate_random_string)

    # Type conversion helpers
    num_to_array = staticmethod(conversion_utils.num_to_array)
    array_to_num = staticmethod(conversion_utils.array_to_num)
    num_to_string = staticmethod(conversion_utils.num_to_string)
    string_to_num = staticmethod(conversion_utils.string_to_num)
    string_to_array = staticmethod(conversion_utils.string_to_array)
    array_to_string = staticmethod(conversion_utils.array_to_string)
    num_to_bool = staticmethod(conversion_utils.num_to_bool)
    bool_to_num = staticmethod(conversion_utils.bool_to_num)
    string_to_bool = staticmethod(conversion_utils.string_to_bool)
    bool_to_string = staticmethod(conversion_utils.bool_to_string)
    array_to_bool = staticmethod(conversion_utils.array_to_bool)
    bool_to_array = staticmethod(conversion_utils.bool_to_array)
    num_to_bool_array = staticmethod(conversion_utils.num_to_bool_array)
    bool_array_to_num = staticmethod(conversion_utils.bool_array_to_num)
    string_to_num_array = staticmethod(conversion_utils.string_to_num_array)
    num_array_to_string = staticmethod(conversion_utils.num_array_to_string)

    @classmethod
    def functions(cls) -> Dict[str, Callable]:
        """Get every helper keyed by name."""
        return {
            name: getattr(cls, name)
            for name, value in vars(cls).items()
            if isinstance(value, staticmethod)
        }


textkit = TextKit()
