import logging
from typing import Dict

logger = logging.getLogger(__name__)


def build_nfa(pattern: str) -> Dict:
    """
    Build an NFA that accepts exactly the literal pattern.

    Every character of the pattern is taken literally; there is no union,
    Kleene star or grouping. The result is a chain of len(pattern) + 1 states
    numbered 0..L, where state i moves to state i + 1 on pattern[i].

    Args:
        pattern (str): The literal pattern to build the NFA from

    Returns:
        Dict: An NFA in the standard FSA format, with list-valued targets

    Raises:
        TypeError: If the pattern is not a string

    Examples:
        build_nfa("ab")  # 0 --a--> 1 --b--> 2, accepting {2}
        build_nfa("")    # single state 0, accepting {0}
    """
    if not isinstance(pattern, str):
        raise TypeError(f"Pattern must be a string, got {type(pattern).__name__}")

    states = list(range(len(pattern) + 1))
    transitions: Dict[int, Dict[str, list]] = {state: {} for state in states}

    for position, symbol in enumerate(pattern):
        transitions[position].setdefault(symbol, []).append(position + 1)

    nfa = {
        'states': states,
        'alphabet': sorted(set(pattern)),
        'transitions': transitions,
        'startingState': 0,
        'acceptingStates': [len(pattern)]
    }

    logger.debug("Built NFA for pattern of length %d: %d states, alphabet %s",
                 len(pattern), len(states), nfa['alphabet'])
    return nfa
