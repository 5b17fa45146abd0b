"""Rename the columns of a pandas DataFrame with one of the case converters.
"""

__docformat__ = 'google'

__all__ = [
    'CASE_STYLES',
    'rename_columns'
]

from typing import Callable, Dict
import pandas as pd
from casefmt.kebab import to_kebab_case
from casefmt.cases import to_camel_case, to_dot_case

CASE_STYLES: Dict[str, Callable] = {
    'kebab': to_kebab_case,
    'camel': to_camel_case,
    'dot': to_dot_case
}
"""Case converters available to `rename_columns`, keyed by style name."""

def rename_columns(frame: pd.DataFrame, style: str = 'kebab') -> pd.DataFrame:
    """
    Convert every column label of a DataFrame to the given case style.

    Args:
        frame: Any DataFrame; labels that are not strings are converted with `str()`
        style: Key of `CASE_STYLES`

    Returns:
        A new DataFrame with renamed columns. The input frame is left unchanged.

    Raises:
        ValueError: If the style is unknown, or if two labels convert to the same name.

    Example:
        >>> frame = pd.DataFrame(columns=['First Name', 'user_id', 'SCREEN_NAME'])
        >>> list(rename_columns(frame, 'camel').columns)
        ['firstName', 'userId', 'screenName']
    """
    converter = CASE_STYLES.get(style)
    if converter is None:
        raise ValueError(f"Unknown case style '{style}', expected one of {list(CASE_STYLES)}")

    renamed = pd.Series(list(frame.columns), index=[converter(c) for c in frame.columns])
    collisions = renamed[renamed.index.duplicated(keep=False)]
    if not collisions.empty:
        raise ValueError(f'Columns collide after conversion to {style} case: {list(collisions)}')

    return frame.set_axis(list(renamed.index), axis='columns')
