from typing import Dict, FrozenSet, Iterable, List, Tuple, Union


def epsilon_closure(fsa: Dict, states: Iterable[int]) -> FrozenSet[int]:
    """
    Compute epsilon closure of a set of states.

    Literal NFAs carry no epsilon ('') transitions, so for them the closure
    is the input set itself.

    Args:
        fsa: The FSA dictionary
        states: Set of states to compute closure for

    Returns:
        Set of states reachable via epsilon transitions
    """
    closure = set(states)
    stack = list(closure)

    while stack:
        current = stack.pop()
        for next_state in _get_transitions(fsa, current, ''):
            if next_state not in closure:
                closure.add(next_state)
                stack.append(next_state)

    return frozenset(closure)


def _get_transitions(fsa: Dict, state: int, symbol: str) -> List[int]:
    """
    Get all states reachable from given state on given symbol.

    Args:
        fsa: The FSA dictionary
        state: Current state
        symbol: Input symbol (or empty string for epsilon)

    Returns:
        List of next states
    """
    return fsa['transitions'].get(state, {}).get(symbol, [])


def _step(nfa: Dict, active: FrozenSet[int], symbol: str) -> FrozenSet[int]:
    targets = set()
    for state in active:
        targets.update(_get_transitions(nfa, state, symbol))
    return epsilon_closure(nfa, targets)


def nfa_accepts(nfa: Dict, input_string: str) -> bool:
    """
    Simulates an NFA over the input string by tracking the set of active states.

    The walk fails fast: as soon as no state is active the input is rejected
    without reading the rest of it.

    Args:
        nfa: A dictionary representing the NFA, targets stored as lists
        input_string: The input string to simulate

    Returns:
        True if any active state after the last symbol is accepting
    """
    active = epsilon_closure(nfa, [nfa['startingState']])

    for symbol in input_string:
        active = _step(nfa, active, symbol)
        if not active:
            return False

    return not active.isdisjoint(nfa['acceptingStates'])


def trace_nondeterministic_fsa(nfa: Dict, input_string: str) -> List[List[int]]:
    """
    Active state sets of an NFA simulation, one entry per consumed symbol.

    The first entry is the initial set. The trace stops at the first empty set.
    """
    active = epsilon_closure(nfa, [nfa['startingState']])
    trace = [sorted(active)]

    for symbol in input_string:
        active = _step(nfa, active, symbol)
        trace.append(sorted(active))
        if not active:
            break

    return trace


def dfa_accepts(dfa: Dict, input_string: str) -> bool:
    """
    Simulates a DFA over the input string.

    A missing transition, including one on a symbol outside the alphabet,
    leads to the implicit dead state and rejects immediately.
    """
    current_state = dfa['startingState']

    for symbol in input_string:
        next_state = dfa['transitions'].get(current_state, {}).get(symbol)
        if next_state is None:
            return False
        current_state = next_state

    return current_state in dfa['acceptingStates']


def simulate_deterministic_fsa(dfa: Dict, input_string: str) -> Union[List[Tuple[int, str, int]], Dict]:
    """
    Simulates a DFA with the given input string, recording the execution path.

    Args:
        dfa: A dictionary representing the DFA with single-state targets
        input_string: The input string to simulate

    Returns:
        If the input is accepted, returns a list of transitions in the format:
        [(current_state, symbol, next_state), ...].
        If the input is rejected, returns a dictionary with:
        {
            'accepted': False,
            'path': [(current_state, symbol, next_state), ...],  # Path up to rejection
            'rejection_reason': str,  # Why rejected
            'rejection_position': int  # Position where rejection occurred
        }
    """
    current_state = dfa['startingState']
    execution_path = []

    for position, symbol in enumerate(input_string):
        if symbol not in dfa['alphabet']:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"Symbol '{symbol}' not in alphabet",
                'rejection_position': position
            }

        next_state = dfa['transitions'].get(current_state, {}).get(symbol)
        if next_state is None:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"No transition defined for symbol '{symbol}' from state '{current_state}'",
                'rejection_position': position
            }

        execution_path.append((current_state, symbol, next_state))
        current_state = next_state

    if current_state in dfa['acceptingStates']:
        return execution_path

    return {
        'accepted': False,
        'path': execution_path,
        'rejection_reason': f"Final state '{current_state}' is not an accepting state",
        'rejection_position': len(input_string)
    }
