import unittest
from casefmt import cases, InvalidInputError
from casefmt.lookups import ConversionExamples

class TestSplitWords(unittest.TestCase):
    def test_split_words(self):
        self.assertEqual(cases.split_words('  SCREEN__NAME '), ['screen', 'name'])

    def test_split_on_punctuation(self):
        self.assertEqual(cases.split_words('a.b/c,d'), ['a', 'b', 'c', 'd'])

    def test_keeps_unicode_letters(self):
        self.assertEqual(cases.split_words('naïve value'), ['naïve', 'value'])

    def test_decomposed_input_stays_whole(self):
        self.assertEqual(cases.split_words('nai\u0308ve value'), ['na\u00efve', 'value'])
        self.assertEqual(cases.to_camel_case('nai\u0308ve value'), 'na\u00efveValue')
        self.assertEqual(cases.to_dot_case('nai\u0308ve value'), 'na\u00efve.value')

class TestToCamelCase(unittest.TestCase):
    def test_reference_examples(self):
        for source, expected in ConversionExamples().for_style('camel'):
            with self.subTest(source=source):
                self.assertEqual(cases.to_camel_case(source), expected)

    def test_does_not_split_humps(self):
        self.assertEqual(cases.to_camel_case('fooBar baz'), 'foobarBaz')

    def test_empty(self):
        self.assertEqual(cases.to_camel_case(''), '')
        self.assertEqual(cases.to_camel_case(' - _ '), '')

    def test_none_raises(self):
        with self.assertRaises(InvalidInputError):
            cases.to_camel_case(None)

class TestToDotCase(unittest.TestCase):
    def test_reference_examples(self):
        for source, expected in ConversionExamples().for_style('dot'):
            with self.subTest(source=source):
                self.assertEqual(cases.to_dot_case(source), expected)

    def test_collapses_separators(self):
        self.assertEqual(cases.to_dot_case('a..b -- c'), 'a.b.c')

    def test_non_string(self):
        self.assertEqual(cases.to_dot_case(123), '123')

    def test_none_raises(self):
        with self.assertRaises(InvalidInputError):
            cases.to_dot_case(None)
