from typing import Dict


def is_deterministic(fsa: Dict) -> bool:
    """
    Checks if the FSA is deterministic.

    An FSA is deterministic if:
    1. It has no epsilon transitions
    2. For each state and each symbol, there is at most one transition

    Targets may be stored either as a list of states (NFA form) or as a
    single state (DFA form).

    Args:
        fsa: A dictionary representing the FSA with the following keys:
            - states: List of all states
            - alphabet: List of symbols in the alphabet
            - transitions: Dictionary of transitions
            - startingState: The starting state
            - acceptingStates: List of accepting states

    Returns:
        bool: True if the FSA is deterministic, False otherwise
    """
    for state in fsa.get('states', []):
        state_transitions = fsa.get('transitions', {}).get(state, {})

        for symbol, targets in state_transitions.items():
            if not isinstance(targets, list):
                # DFA form, a single target by construction
                continue
            if symbol == '' and targets:
                return False
            if len(targets) > 1:
                return False

    return True


def transition_count(fsa: Dict) -> int:
    """Number of (state, symbol, target) triples in the FSA."""
    count = 0
    for state_transitions in fsa['transitions'].values():
        for targets in state_transitions.values():
            count += len(targets) if isinstance(targets, list) else 1
    return count


def validate_fsa_structure(fsa: Dict) -> Dict:
    """
    Validates that the FSA has the required structure.

    Args:
        fsa: The FSA dictionary to validate

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    if not isinstance(fsa, dict):
        return {'valid': False, 'error': 'FSA must be a dictionary'}

    required_keys = ['states', 'alphabet', 'transitions', 'startingState', 'acceptingStates']

    for key in required_keys:
        if key not in fsa:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    if not isinstance(fsa['states'], list):
        return {'valid': False, 'error': 'states must be a list'}

    if not isinstance(fsa['alphabet'], list):
        return {'valid': False, 'error': 'alphabet must be a list'}

    if not isinstance(fsa['transitions'], dict):
        return {'valid': False, 'error': 'transitions must be a dictionary'}

    if not isinstance(fsa['acceptingStates'], list):
        return {'valid': False, 'error': 'acceptingStates must be a list'}

    states = set(fsa['states'])
    alphabet = set(fsa['alphabet'])

    if fsa['startingState'] not in states:
        return {'valid': False, 'error': 'Starting state not in states list'}

    for state in fsa['acceptingStates']:
        if state not in states:
            return {'valid': False, 'error': f'Accepting state {state} not in states list'}

    for state, state_transitions in fsa['transitions'].items():
        if state not in states:
            return {'valid': False, 'error': f'Transition source {state} not in states list'}
        if not isinstance(state_transitions, dict):
            return {'valid': False, 'error': f'Transitions of state {state} must be a dictionary'}

        for symbol, targets in state_transitions.items():
            if symbol != '' and symbol not in alphabet:
                return {'valid': False, 'error': f"Symbol '{symbol}' not in alphabet"}

            target_list = targets if isinstance(targets, list) else [targets]
            for target in target_list:
                if target not in states:
                    return {'valid': False, 'error': f'Transition target {target} not in states list'}

    return {'valid': True}
