from django.test import TestCase
from searchsystem.pda_recognition import check_recognizer_symbols, recognize_equal_runs


class TestRecognizeEqualRuns(TestCase):
    def test_accepted_strings(self):
        for accepted in ['', 'ab', 'aabb', 'aaabbb']:
            self.assertTrue(recognize_equal_runs(accepted), accepted)

    def test_rejected_strings(self):
        for rejected in ['aaab', 'abab', 'aabbb', 'a', 'b', 'ba', 'abc', 'aabba', 'c']:
            self.assertFalse(recognize_equal_runs(rejected), rejected)

    def test_long_balanced_input(self):
        self.assertTrue(recognize_equal_runs('a' * 500 + 'b' * 500))
        self.assertFalse(recognize_equal_runs('a' * 500 + 'b' * 499))

    def test_custom_symbols(self):
        self.assertTrue(recognize_equal_runs('((()))', '(', ')'))
        self.assertFalse(recognize_equal_runs('()()', '(', ')'))
        self.assertFalse(recognize_equal_runs('aabb', '(', ')'))

    def test_identical_symbols_raise_error(self):
        with self.assertRaises(ValueError):
            recognize_equal_runs('aa', 'a', 'a')

    def test_symbols_must_be_single_characters(self):
        for push_symbol, pop_symbol in [('ab', 'x'), ('a', ''), ('', 'b'), (None, 'b'), ('a', 1)]:
            with self.assertRaises(ValueError):
                recognize_equal_runs('', push_symbol, pop_symbol)
            with self.assertRaises(ValueError):
                check_recognizer_symbols(push_symbol, pop_symbol)

    def test_valid_symbols_pass_check(self):
        self.assertIsNone(check_recognizer_symbols('(', ')'))
