__docformat__ = 'google'

__all__ = [
    'InvalidInputError'
]

class InvalidInputError(ValueError):
    """
    Raised when a converter receives no value, or `add_numbers` receives
    something that is not a usable number.

    Subclasses `ValueError`, so callers that already guard against bad
    values keep working.
    """
