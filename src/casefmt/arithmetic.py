__docformat__ = 'google'

__all__ = [
    'add_numbers'
]

import math
from numbers import Integral, Real
from casefmt.errors import InvalidInputError

def _check_number(value) -> None:
    if value is None:
        raise InvalidInputError('Arguments cannot be null.')
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError('Both arguments must be valid numbers.')
    if not isinstance(value, Integral) and math.isnan(value):
        raise InvalidInputError('Both arguments must be valid numbers.')

def add_numbers(a: Real, b: Real) -> Real:
    """
    Add two numbers.

    Args:
        a: First number
        b: Second number

    Returns:
        The sum of `a` and `b`

    Raises:
        InvalidInputError: If either argument is None, is not a real number
            (booleans and numeric strings included), or is NaN.

    Example:
        >>> add_numbers(5, 3)
        8
        >>> add_numbers(0.5, 2)
        2.5
    """
    _check_number(a)
    _check_number(b)
    return a + b
