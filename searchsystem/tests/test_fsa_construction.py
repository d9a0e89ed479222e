from django.test import TestCase
from searchsystem.fsa_construction import build_nfa
from searchsystem.fsa_properties import is_deterministic, validate_fsa_structure


class TestBuildNfa(TestCase):
    """Test cases for the literal pattern NFA builder"""

    def test_two_symbol_chain(self):
        """Test the chain built for 'ab'"""
        nfa = build_nfa('ab')

        self.assertEqual(nfa, {
            'states': [0, 1, 2],
            'alphabet': ['a', 'b'],
            'transitions': {
                0: {'a': [1]},
                1: {'b': [2]},
                2: {}
            },
            'startingState': 0,
            'acceptingStates': [2]
        })

    def test_empty_pattern(self):
        """Empty pattern gives one state that is both start and final"""
        nfa = build_nfa('')

        self.assertEqual(nfa['states'], [0])
        self.assertEqual(nfa['alphabet'], [])
        self.assertEqual(nfa['transitions'], {0: {}})
        self.assertEqual(nfa['startingState'], 0)
        self.assertEqual(nfa['acceptingStates'], [0])

    def test_repeated_symbols(self):
        """Repeated symbols share one alphabet entry but get their own transitions"""
        nfa = build_nfa('aaba')

        self.assertEqual(nfa['states'], [0, 1, 2, 3, 4])
        self.assertEqual(nfa['alphabet'], ['a', 'b'])
        self.assertEqual(nfa['transitions'][0], {'a': [1]})
        self.assertEqual(nfa['transitions'][1], {'a': [2]})
        self.assertEqual(nfa['transitions'][2], {'b': [3]})
        self.assertEqual(nfa['transitions'][3], {'a': [4]})
        self.assertEqual(nfa['acceptingStates'], [4])

    def test_metacharacters_are_literal(self):
        """Regex operators are plain symbols"""
        nfa = build_nfa('a*b|')

        self.assertEqual(len(nfa['states']), 5)
        self.assertEqual(nfa['alphabet'], ['*', 'a', 'b', '|'])
        self.assertEqual(nfa['transitions'][1], {'*': [2]})

    def test_chain_is_well_formed_and_deterministic(self):
        """Every built NFA passes validation and has no real nondeterminism"""
        for pattern in ['', 'a', 'ab', 'ACGT', 'aaaa', 'abcabc']:
            nfa = build_nfa(pattern)
            self.assertTrue(validate_fsa_structure(nfa)['valid'], pattern)
            self.assertTrue(is_deterministic(nfa), pattern)
            self.assertEqual(len(nfa['states']), len(pattern) + 1)

    def test_non_string_pattern_raises_error(self):
        """Test that a non-string pattern raises TypeError"""
        with self.assertRaises(TypeError):
            build_nfa(['a', 'b'])
