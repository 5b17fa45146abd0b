"""
String case converters.

`to_kebab_case` is the Unicode-aware tokenizer: it strips diacritics and
splits camelCase, acronyms and letter/digit runs before joining lowercase
tokens with hyphens. `to_camel_case` and `to_dot_case` split on separator
characters only. `rename_columns` applies any of them to the columns of a
pandas DataFrame.

See individual module documentation for detailed information.
"""
from . import kebab
from . import cases
from . import arithmetic
from . import frames
from . import lookups
from .errors import InvalidInputError
from .kebab import to_kebab_case
from .cases import to_camel_case, to_dot_case
from .arithmetic import add_numbers
from .frames import rename_columns

__all__ = [
    'kebab',
    'cases',
    'arithmetic',
    'frames',
    'lookups',
    'InvalidInputError',
    'to_kebab_case',
    'to_camel_case',
    'to_dot_case',
    'add_numbers',
    'rename_columns'
]
