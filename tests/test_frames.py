import unittest
import pandas as pd
from casefmt import frames

class TestRenameColumns(unittest.TestCase):
    def setUp(self):
        self.frame = pd.DataFrame(
            [['Ada', 1, 'ada', '555']],
            columns=['First Name', 'user_id', 'SCREEN_NAME', 'mobile-number']
        )

    def test_kebab_is_default(self):
        result = frames.rename_columns(self.frame)
        self.assertEqual(list(result.columns), ['first-name', 'user-id', 'screen-name', 'mobile-number'])

    def test_camel(self):
        result = frames.rename_columns(self.frame, 'camel')
        self.assertEqual(list(result.columns), ['firstName', 'userId', 'screenName', 'mobileNumber'])

    def test_dot(self):
        result = frames.rename_columns(self.frame, 'dot')
        self.assertEqual(list(result.columns), ['first.name', 'user.id', 'screen.name', 'mobile.number'])

    def test_values_kept_and_input_untouched(self):
        result = frames.rename_columns(self.frame)
        self.assertEqual(result.loc[0, 'first-name'], 'Ada')
        self.assertEqual(list(self.frame.columns), ['First Name', 'user_id', 'SCREEN_NAME', 'mobile-number'])

    def test_non_string_labels(self):
        frame = pd.DataFrame([[1, 2]], columns=[2024, 'Total Count'])
        result = frames.rename_columns(frame)
        self.assertEqual(list(result.columns), ['2024', 'total-count'])

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            frames.rename_columns(self.frame, 'snake')

    def test_collisions(self):
        frame = pd.DataFrame(columns=['userId', 'user_id', 'other'])
        with self.assertRaisesRegex(ValueError, 'collide'):
            frames.rename_columns(frame)
