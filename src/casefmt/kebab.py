"""Unicode-aware kebab-case conversion.

The converter runs in stages, each exposed as its own function:

    1. `coerce_text`: reject `None` and turn anything else into a string
    2. `strip_diacritics`: NFKD-normalize and drop combining marks
    3. `mark_boundaries`: insert a space at camelCase, acronym and
        letter/digit transitions
    4. `tokenize`: split on any run of non-alphanumeric characters and lowercase

`to_kebab_case` chains them and joins the tokens with hyphens.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'CharClass',
    # Functions
    'coerce_text',
    'strip_diacritics',
    'classify',
    'mark_boundaries',
    'tokenize',
    'to_kebab_case'
]

import unicodedata
from enum import Enum
from typing import Any, List, Optional
from casefmt.errors import InvalidInputError
from casefmt.patterns import (
    LETTER,
    NUMBER,
    MARK,
    UPPERCASE,
    LOWERCASE,
    NORMAL_FORM,
    BOUNDARY,
    KEBAB_SEPARATOR,
    SEPARATOR_PATTERN
)

class CharClass(Enum):
    """
    Classification of a single character for boundary detection.
    """
    UPPER = "upper"
    LOWER = "lower"
    LETTER = "letter"
    DIGIT = "digit"
    OTHER = "other"

    @property
    def is_letter(self) -> bool:
        return self in (CharClass.UPPER, CharClass.LOWER, CharClass.LETTER)

def coerce_text(value: Any) -> str:
    """
    Convert any value to text, refusing `None`.

    Args:
        value: Value to convert

    Returns:
        `value` unchanged if it is already a string, else `str(value)`

    Raises:
        InvalidInputError: If `value` is None.

    Example:
        >>> coerce_text(42)
        '42'
        >>> coerce_text(True)
        'True'
    """
    if value is None:
        raise InvalidInputError('Input must not be None')
    if isinstance(value, str):
        return value
    return str(value)

def strip_diacritics(text: str) -> str:
    """
    Decompose text and drop all combining marks.

    Compatibility decomposition also expands ligatures and
    superscripts, so 'ﬁ' becomes 'fi' and '²' becomes '2'.

    Args:
        text: Any string

    Returns:
        Text with accented letters replaced by their base letters

    Example:
        >>> strip_diacritics('naïve café')
        'naive cafe'
    """
    decomposed = unicodedata.normalize(NORMAL_FORM, text)
    return ''.join(
        char for char in decomposed
        if not unicodedata.category(char).startswith(MARK)
    )

def classify(char: str) -> CharClass:
    """
    Get the `CharClass` of a single character.

    Uppercase letters without a distinct lowercase form are classed as
    plain letters, so lowercasing never creates a new boundary and
    conversion stays idempotent.

    Example:
        >>> classify('A')
        <CharClass.UPPER: 'upper'>
        >>> classify('7')
        <CharClass.DIGIT: 'digit'>
        >>> classify('_')
        <CharClass.OTHER: 'other'>
    """
    category = unicodedata.category(char)
    if category == UPPERCASE:
        return CharClass.UPPER if char.lower() != char else CharClass.LETTER
    if category == LOWERCASE:
        return CharClass.LOWER
    if category.startswith(LETTER):
        return CharClass.LETTER
    if category.startswith(NUMBER):
        return CharClass.DIGIT
    return CharClass.OTHER

def _is_boundary(
    previous: CharClass,
    current: CharClass,
    following: Optional[CharClass],
    letters: int
) -> bool:
    # fooBar, v2Endpoint
    if previous in (CharClass.LOWER, CharClass.DIGIT) and current is CharClass.UPPER:
        return True
    # XMLHttp: split before the last capital of the acronym
    if previous is CharClass.UPPER and current is CharClass.UPPER:
        return following is CharClass.LOWER
    # a single letter keeps its digits (v2, h1)
    if previous.is_letter and current is CharClass.DIGIT:
        return letters > 1
    if previous is CharClass.DIGIT and current.is_letter:
        return True
    return False

def mark_boundaries(text: str) -> str:
    """
    Insert a boundary marker at every word transition inside a run of characters.

    Transitions recognized, scanning left to right:
        1. lowercase letter or digit followed by an uppercase letter
        2. uppercase letter followed by an uppercase letter that starts a
            lowercase word (acronym followed by a word)
        3. letter followed by a digit, unless the letter is a one-letter
            word on its own (so 'v2' and 'h1' stay whole)
        4. digit followed by a letter

    Args:
        text: Text with diacritics already stripped

    Returns:
        Text with a space inserted at each transition

    Example:
        >>> mark_boundaries('XMLHttpRequest')
        'XML Http Request'
        >>> mark_boundaries('v2Endpoint')
        'v2 Endpoint'
        >>> mark_boundaries('page10of20')
        'page 10 of 20'
    """
    classes = [classify(char) for char in text]
    pieces = []
    letters = 0 # letters since the last boundary
    for i, char in enumerate(text):
        current = classes[i]
        if i > 0:
            following = classes[i + 1] if i + 1 < len(classes) else None
            if _is_boundary(classes[i - 1], current, following, letters):
                pieces.append(BOUNDARY)
                letters = 0
        letters = letters + 1 if current.is_letter else 0
        pieces.append(char)
    return ''.join(pieces)

def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase tokens of letters and digits.

    Any run of characters that are neither letters nor digits separates
    two tokens. Leading and trailing separators produce no empty tokens.

    Args:
        text: Any string

    Returns:
        List of lowercase tokens in their original order

    Example:
        >>> tokenize('  end_of  LINE!! ')
        ['end', 'of', 'line']
        >>> tokenize('--')
        []
    """
    cleaned = SEPARATOR_PATTERN.sub(BOUNDARY, text).strip(BOUNDARY)
    if cleaned == '':
        return []
    return [token.lower() for token in cleaned.split(BOUNDARY) if token]

def to_kebab_case(value: Any) -> str:
    """
    Convert a value to kebab-case.

    Non-string values are converted with `str()`. The result holds only
    lowercase letters, digits and single hyphens, with no hyphen at
    either end. Converting a result again returns it unchanged.

    Args:
        value: Value to convert

    Returns:
        Kebab-cased string, or an empty string if no letters or digits remain

    Raises:
        InvalidInputError: If `value` is None.

    Example:
        >>> to_kebab_case('First Name')
        'first-name'
        >>> to_kebab_case('user_id')
        'user-id'
        >>> to_kebab_case('ScreenName')
        'screen-name'
        >>> to_kebab_case('naïve value')
        'naive-value'
        >>> to_kebab_case('v2Endpoint')
        'v2-endpoint'
        >>> to_kebab_case('XMLHttpRequest')
        'xml-http-request'
    """
    text = coerce_text(value)
    text = strip_diacritics(text)
    text = mark_boundaries(text)
    return KEBAB_SEPARATOR.join(tokenize(text))
