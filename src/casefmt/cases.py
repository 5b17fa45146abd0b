"""Camel and dot case converters.

These split on separators only: any run of characters that is not a
letter or digit (spaces, underscores, hyphens, punctuation) ends a word.
Unlike `casefmt.kebab.to_kebab_case`, they do not look for camelCase humps
inside a word and keep diacritics as they are.
"""

__docformat__ = 'google'

__all__ = [
    'split_words',
    'to_camel_case',
    'to_dot_case'
]

import unicodedata
from typing import Any, List
from casefmt.kebab import coerce_text
from casefmt.patterns import SEPARATOR_PATTERN, DOT_SEPARATOR, COMPOSED_FORM

def split_words(value: Any) -> List[str]:
    """
    Split a value into lowercase words on separator characters.

    Args:
        value: Value to split; non-strings are converted with `str()`

    Returns:
        List of lowercase words, without empty strings

    Raises:
        InvalidInputError: If `value` is None.

    Example:
        >>> split_words('  SCREEN__NAME ')
        ['screen', 'name']
        >>> split_words('mobile-number')
        ['mobile', 'number']
        >>> split_words('nai\u0308ve value')
        ['naïve', 'value']
    """
    text = unicodedata.normalize(COMPOSED_FORM, coerce_text(value))
    return [word.lower() for word in SEPARATOR_PATTERN.split(text) if word]

def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]

def to_camel_case(value: Any) -> str:
    """
    Convert a value to camelCase.

    Args:
        value: Value to convert

    Returns:
        First word in lowercase followed by the remaining words capitalized,
        with no separators

    Raises:
        InvalidInputError: If `value` is None.

    Example:
        >>> to_camel_case('first name')
        'firstName'
        >>> to_camel_case('user_id')
        'userId'
        >>> to_camel_case('SCREEN_NAME')
        'screenName'
        >>> to_camel_case('mobile-number')
        'mobileNumber'
    """
    words = split_words(value)
    return ''.join(words[:1] + [_capitalize(word) for word in words[1:]])

def to_dot_case(value: Any) -> str:
    """
    Convert a value to dot.case.

    Example:
        >>> to_dot_case('first name')
        'first.name'
        >>> to_dot_case('SCREEN_NAME')
        'screen.name'
    """
    return DOT_SEPARATOR.join(split_words(value))
