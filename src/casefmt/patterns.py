"""Regex patterns and Unicode category constants used for splitting words.
"""

__docformat__ = 'google'

import re

## Unicode categories
LETTER: str = 'L'
"""General category prefix shared by all letters (Lu, Ll, Lt, Lm, Lo)."""

NUMBER: str = 'N'
"""General category prefix shared by all numbers (Nd, Nl, No)."""

MARK: str = 'M'
"""General category prefix shared by combining marks (Mn, Mc, Me).

Marks are dropped after NFKD decomposition, so 'ï' becomes 'i'."""

UPPERCASE: str = 'Lu'
LOWERCASE: str = 'Ll'

NORMAL_FORM: str = 'NFKD'
"""Unicode normal form used before diacritics are stripped."""

COMPOSED_FORM: str = 'NFC'
"""Unicode normal form used before splitting words that keep their diacritics.

Composing first keeps a decomposed 'i\\u0308' together as 'ï' instead of
splitting on the combining mark."""

## Separators
BOUNDARY: str = ' '
"""Boundary marker inserted between tokens while splitting. @private"""

KEBAB_SEPARATOR: str = '-'
DOT_SEPARATOR: str = '.'

# Patterns
SEPARATOR_PATTERN: re.Pattern = re.compile(r'[\W_]+')
"""Compiled regex matching a run of characters that are neither letters nor digits.

`\\w` is Unicode-aware for `str` patterns, so this keeps accented and
non-Latin letters. Underscores are matched explicitly since `\\w` includes them.

Used in `casefmt.kebab.tokenize` and `casefmt.cases.split_words`."""
