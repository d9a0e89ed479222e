import logging
from collections import deque
from typing import Dict, List, Tuple

from .fsa_properties import validate_fsa_structure
from .fsa_simulation import epsilon_closure

logger = logging.getLogger(__name__)


def nfa_to_dfa_with_subsets(nfa: Dict) -> Tuple[Dict, Dict[int, List[int]]]:
    """
    Converts an NFA to a DFA using the subset construction algorithm.

    Subsets of NFA states are explored breadth-first from the closure of the
    starting state, which becomes DFA state 0. Each new subset receives the
    next free integer id in discovery order; a subset reached again along a
    different path resolves to the id it already has. Symbols are visited in
    sorted order so that numbering is reproducible. Moves that lead to the
    empty subset are left undefined instead of creating a dead state.

    Args:
        nfa (Dict): A dictionary representing the NFA with the following keys:
            - states: List of all states
            - alphabet: List of symbols in the alphabet (excluding epsilon)
            - transitions: Dictionary of list-valued transitions
            - startingState: The starting state
            - acceptingStates: List of accepting states

    Returns:
        Tuple[Dict, Dict[int, List[int]]]: The DFA, with single-state targets,
        and the sorted NFA subset behind every DFA state id

    Raises:
        ValueError: If the input is not a valid NFA structure
    """
    validation_result = validate_fsa_structure(nfa)
    if not validation_result['valid']:
        raise ValueError(f"Invalid NFA structure: {validation_result.get('error', 'Unknown error')}")

    alphabet = sorted(nfa['alphabet'])
    nfa_accepting = frozenset(nfa['acceptingStates'])

    # Subsets are keyed by their sorted tuple so equal sets share one id
    start_key = tuple(sorted(epsilon_closure(nfa, [nfa['startingState']])))
    subset_ids: Dict[Tuple[int, ...], int] = {start_key: 0}
    queue = deque([start_key])

    dfa_transitions: Dict[int, Dict[str, int]] = {}
    dfa_accepting = []

    while queue:
        current_key = queue.popleft()
        current_id = subset_ids[current_key]
        dfa_transitions[current_id] = {}

        for symbol in alphabet:
            moved_states = set()
            for state in current_key:
                moved_states.update(nfa['transitions'].get(state, {}).get(symbol, []))

            if not moved_states:
                continue

            next_key = tuple(sorted(epsilon_closure(nfa, moved_states)))
            if next_key not in subset_ids:
                subset_ids[next_key] = len(subset_ids)
                queue.append(next_key)

            dfa_transitions[current_id][symbol] = subset_ids[next_key]

        if nfa_accepting.intersection(current_key):
            dfa_accepting.append(current_id)

    dfa = {
        'states': sorted(subset_ids.values()),
        'alphabet': alphabet,
        'transitions': dfa_transitions,
        'startingState': 0,
        'acceptingStates': sorted(dfa_accepting)
    }
    subsets = {state_id: list(key) for key, state_id in subset_ids.items()}

    logger.debug("Subset construction: %d NFA states -> %d DFA states",
                 len(nfa['states']), len(dfa['states']))
    return dfa, subsets


def nfa_to_dfa(nfa: Dict) -> Dict:
    """
    Converts a non-deterministic finite automaton (NFA) to a deterministic finite automaton (DFA).

    See nfa_to_dfa_with_subsets for the construction; the NFA is only read.
    """
    dfa, _ = nfa_to_dfa_with_subsets(nfa)
    return dfa
