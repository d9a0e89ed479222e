import copy

from django.test import TestCase
from searchsystem.fsa_construction import build_nfa
from searchsystem.fsa_properties import is_deterministic
from searchsystem.fsa_simulation import dfa_accepts, nfa_accepts
from searchsystem.fsa_transformations import nfa_to_dfa, nfa_to_dfa_with_subsets


class TestNfaToDfa(TestCase):
    """Test cases for NFA to DFA conversion function"""

    def test_literal_chain_conversion(self):
        """The DFA of a literal chain mirrors the chain"""
        dfa = nfa_to_dfa(build_nfa('ab'))

        self.assertEqual(dfa, {
            'states': [0, 1, 2],
            'alphabet': ['a', 'b'],
            'transitions': {
                0: {'a': 1},
                1: {'b': 2},
                2: {}
            },
            'startingState': 0,
            'acceptingStates': [2]
        })

    def test_state_count_matches_nfa(self):
        """Subset construction adds no states to a literal chain"""
        for pattern in ['', 'a', 'ab', 'aaa', 'abab', 'GATTACA']:
            nfa = build_nfa(pattern)
            dfa = nfa_to_dfa(nfa)
            self.assertEqual(len(dfa['states']), len(nfa['states']), pattern)
            self.assertTrue(is_deterministic(dfa), pattern)

    def test_empty_pattern(self):
        dfa = nfa_to_dfa(build_nfa(''))

        self.assertEqual(dfa['states'], [0])
        self.assertEqual(dfa['transitions'], {0: {}})
        self.assertEqual(dfa['acceptingStates'], [0])

    def test_conversion_is_reproducible(self):
        """Two conversions of the same NFA give identical numbering"""
        nfa = build_nfa('abcab')

        self.assertEqual(nfa_to_dfa(nfa), nfa_to_dfa(nfa))

    def test_nfa_is_not_mutated(self):
        nfa = build_nfa('abba')
        snapshot = copy.deepcopy(nfa)

        nfa_to_dfa(nfa)

        self.assertEqual(nfa, snapshot)

    def test_simple_nfa_conversion(self):
        """Test conversion of an NFA with real nondeterminism"""
        # NFA that accepts strings ending with 'ab'
        nfa = {
            'states': [0, 1, 2],
            'alphabet': ['a', 'b'],
            'transitions': {
                0: {'a': [0, 1], 'b': [0]},
                1: {'b': [2]},
                2: {}
            },
            'startingState': 0,
            'acceptingStates': [2]
        }

        dfa, subsets = nfa_to_dfa_with_subsets(nfa)

        # {0} -a-> {0,1} -b-> {0,2}, discovered in that order
        self.assertEqual(subsets, {0: [0], 1: [0, 1], 2: [0, 2]})
        self.assertEqual(dfa['transitions'], {
            0: {'a': 1, 'b': 0},
            1: {'a': 1, 'b': 2},
            2: {'a': 1, 'b': 0}
        })
        self.assertEqual(dfa['acceptingStates'], [2])

        test_strings = ['', 'a', 'b', 'ab', 'ba', 'aab', 'abb', 'abab', 'baba']
        for test_string in test_strings:
            self.assertEqual(nfa_accepts(nfa, test_string), dfa_accepts(dfa, test_string),
                             f"Disagreement on string '{test_string}'")

    def test_equal_subsets_share_one_id(self):
        """A subset reached along two paths gets a single DFA state"""
        # Both 'a' and 'b' lead from 0 to {1, 2}
        nfa = {
            'states': [0, 1, 2],
            'alphabet': ['a', 'b'],
            'transitions': {
                0: {'a': [1, 2], 'b': [2, 1]},
                1: {},
                2: {}
            },
            'startingState': 0,
            'acceptingStates': [1]
        }

        dfa, subsets = nfa_to_dfa_with_subsets(nfa)

        self.assertEqual(dfa['states'], [0, 1])
        self.assertEqual(dfa['transitions'][0], {'a': 1, 'b': 1})
        self.assertEqual(subsets[1], [1, 2])
        self.assertEqual(dfa['acceptingStates'], [1])

    def test_nfa_with_epsilon_transitions(self):
        """Epsilon moves are folded into the subsets"""
        # NFA that accepts 'a*b'
        nfa = {
            'states': [0, 1, 2, 3],
            'alphabet': ['a', 'b'],
            'transitions': {
                0: {'': [1], 'a': [0]},
                1: {'': [2]},
                2: {'b': [3]},
                3: {}
            },
            'startingState': 0,
            'acceptingStates': [3]
        }

        dfa, subsets = nfa_to_dfa_with_subsets(nfa)

        self.assertEqual(subsets[0], [0, 1, 2])
        self.assertTrue(is_deterministic(dfa))
        for test_string in ['b', 'ab', 'aab', 'aaab', 'bb', 'aba', 'ba', '']:
            self.assertEqual(nfa_accepts(nfa, test_string), dfa_accepts(dfa, test_string),
                             f"Disagreement on string '{test_string}'")

    def test_no_sink_state(self):
        """Missing moves stay undefined instead of leading to a dead state"""
        dfa = nfa_to_dfa(build_nfa('ab'))

        self.assertNotIn('b', dfa['transitions'][0])
        self.assertNotIn('a', dfa['transitions'][1])

    def test_invalid_nfa_structure_raises_error(self):
        """Test that invalid NFA structure raises ValueError"""
        invalid_nfa = {
            'states': [0],
            'alphabet': ['a']
            # Missing transitions, startingState, acceptingStates
        }

        with self.assertRaises(ValueError):
            nfa_to_dfa(invalid_nfa)

    def test_transition_outside_alphabet_raises_error(self):
        nfa = {
            'states': [0, 1],
            'alphabet': ['a'],
            'transitions': {0: {'b': [1]}, 1: {}},
            'startingState': 0,
            'acceptingStates': [1]
        }

        with self.assertRaises(ValueError):
            nfa_to_dfa(nfa)
