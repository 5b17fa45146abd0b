"""Reference conversions shipped with the package.
"""

__docformat__ = 'google'

__all__ = [
    'ConversionExamples'
]

import logging
import pandas as pd
import yaml
from functools import cached_property
from typing import List, Tuple
from casefmt.connections import ExampleDataSource

logger = logging.getLogger(__name__)

class ConversionExamples(ExampleDataSource):
    """
    Table of `(style, source, expected)` records read from `data/examples.yaml`.

    Attributes:
        data: The full table as a DataFrame
        style, source, expected: Columns of `data`
    """
    COLUMNS = ['style', 'source', 'expected']

    def __init__(self):
        with self.yaml_path.open('r', encoding='utf-8') as f:
            grouped = yaml.safe_load(f)

        records = [
            (style, str(example['source']), str(example['expected']))
            for style, examples in grouped.items()
            for example in examples
        ]
        logger.debug('Loaded %d reference conversions for styles %s', len(records), list(grouped))

        self.data = pd.DataFrame.from_records(records, columns=self.COLUMNS)
        for column in self.data.columns:
            setattr(self, column, self.data[column])

    @cached_property
    def styles(self) -> List[str]:
        """Sorted names of the case styles that have reference conversions."""
        return sorted(self.data['style'].unique())

    def for_style(self, style: str) -> List[Tuple[str, str]]:
        """
        Get the reference conversions for one case style.

        Args:
            style: A case style such as 'kebab', 'camel' or 'dot'

        Returns:
            List of `(source, expected)` pairs in file order

        Raises:
            ValueError: If the file has no examples for `style`.
        """
        rows = self.data[self.data['style'] == style]
        if rows.empty:
            raise ValueError(f"No reference conversions for style '{style}'")
        return list(zip(rows['source'], rows['expected']))
