from typing import Dict, List, Tuple


def transition_triples(fsa: Dict) -> List[Tuple[int, str, int]]:
    """
    List the transitions of an FSA as (state, symbol, target) triples.

    Works for list-valued (NFA) and single-state (DFA) targets. Triples are
    sorted by state, symbol and target.
    """
    triples = []
    for state, state_transitions in fsa['transitions'].items():
        for symbol, targets in state_transitions.items():
            target_list = targets if isinstance(targets, list) else [targets]
            for target in target_list:
                triples.append((state, symbol, target))
    return sorted(triples)


def format_transition_table(fsa: Dict, title: str) -> str:
    """
    Render the transitions, starting state and accepting states of an FSA.

    Example for the NFA of "ab":

        NFA Transitions:
          0 --a--> 1
          1 --b--> 2
        Start: 0
        Final: 2
    """
    lines = [f"{title} Transitions:"]
    for state, symbol, target in transition_triples(fsa):
        lines.append(f"  {state} --{symbol}--> {target}")
    lines.append(f"Start: {fsa['startingState']}")
    lines.append("Final: " + " ".join(str(state) for state in sorted(fsa['acceptingStates'])))
    return "\n".join(lines)
