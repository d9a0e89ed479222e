import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .approximate_matching import best_match_cost
from .conf import get_setting
from .formatting import transition_triples
from .fsa_construction import build_nfa
from .fsa_properties import is_deterministic, transition_count
from .fsa_simulation import (
    dfa_accepts,
    nfa_accepts,
    simulate_deterministic_fsa,
    trace_nondeterministic_fsa
)
from .fsa_transformations import nfa_to_dfa, nfa_to_dfa_with_subsets
from .pda_recognition import check_recognizer_symbols, recognize_equal_runs

logger = logging.getLogger(__name__)


def _read_string(data: dict, key: str, max_length: int, required: bool = True) -> str:
    """Pull a string field out of a request body, enforcing its length limit."""
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    if key not in data:
        if required:
            raise ValueError(f'Missing {key}')
        return ''

    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f'{key} must be a string')
    if len(value) > max_length:
        raise ValueError(f'{key} is longer than {max_length} characters')
    return value


def _automaton_stats(fsa: dict) -> dict:
    return {
        'states_count': len(fsa['states']),
        'alphabet_size': len(fsa['alphabet']),
        'transitions_count': transition_count(fsa),
        'accepting_states_count': len(fsa['acceptingStates']),
        'is_deterministic': is_deterministic(fsa)
    }


@csrf_exempt
@require_POST
def build_automata(request):
    """
    Django view to build the NFA of a literal pattern and its equivalent DFA.

    Expects a POST request with a JSON body containing:
    - pattern: The literal pattern

    Returns a JSON response with both automata, their transition triples,
    the NFA subset behind each DFA state and size statistics.
    """
    try:
        data = json.loads(request.body)
        pattern = _read_string(data, 'pattern', get_setting('MAX_PATTERN_LENGTH'))

        nfa = build_nfa(pattern)
        dfa, subsets = nfa_to_dfa_with_subsets(nfa)

        return JsonResponse({
            'success': True,
            'pattern': pattern,
            'nfa': nfa,
            'dfa': dfa,
            'nfa_transitions': transition_triples(nfa),
            'dfa_transitions': transition_triples(dfa),
            'dfa_subsets': subsets,
            'statistics': {
                'nfa': _automaton_stats(nfa),
                'dfa': _automaton_stats(dfa)
            }
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Automaton construction failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def simulate(request):
    """
    Django view to run an input string through the NFA and DFA of a pattern.

    Expects a POST request with a JSON body containing:
    - pattern: The literal pattern
    - input: The input string to simulate (defaults to the empty string)
    """
    try:
        data = json.loads(request.body)
        pattern = _read_string(data, 'pattern', get_setting('MAX_PATTERN_LENGTH'))
        input_string = _read_string(data, 'input', get_setting('MAX_TEXT_LENGTH'), required=False)

        nfa = build_nfa(pattern)
        dfa = nfa_to_dfa(nfa)

        response = {
            'nfa_accepted': nfa_accepts(nfa, input_string),
            'dfa_accepted': dfa_accepts(dfa, input_string),
            'nfa_trace': trace_nondeterministic_fsa(nfa, input_string)
        }

        result = simulate_deterministic_fsa(dfa, input_string)
        if isinstance(result, list):
            response['dfa_path'] = result
        else:
            response['dfa_path'] = result['path']
            response['rejection_reason'] = result['rejection_reason']
            response['rejection_position'] = result['rejection_position']

        return JsonResponse(response)

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Simulation failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def approximate_match(request):
    """
    Django view to search a text for a pattern within an edit-distance budget.

    Expects a POST request with a JSON body containing:
    - text: The text (for example a DNA sequence) to search in
    - pattern: The pattern to search for
    - max_errors: Optional error budget, defaults to DEFAULT_MAX_ERRORS
    """
    try:
        data = json.loads(request.body)
        text = _read_string(data, 'text', get_setting('MAX_TEXT_LENGTH'))
        pattern = _read_string(data, 'pattern', get_setting('MAX_PATTERN_LENGTH'))

        max_errors = data.get('max_errors', get_setting('DEFAULT_MAX_ERRORS'))
        if not isinstance(max_errors, int) or isinstance(max_errors, bool) or max_errors < 0:
            return JsonResponse({'error': 'max_errors must be a non-negative integer'}, status=400)

        cost = best_match_cost(text, pattern)

        return JsonResponse({
            'matched': cost is not None and cost <= max_errors,
            'best_cost': cost,
            'max_errors': max_errors
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Approximate matching failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def recognize_equal_runs_view(request):
    """
    Django view to test a string against the configured push^n pop^n language.

    Expects a POST request with a JSON body containing:
    - input: The string to test
    """
    try:
        push_symbol, pop_symbol = get_setting('RECOGNIZER_SYMBOLS')
        check_recognizer_symbols(push_symbol, pop_symbol)
    except ValueError as e:
        logger.error("Invalid RECOGNIZER_SYMBOLS setting: %s", e)
        return JsonResponse({'error': f'Server configuration error: {str(e)}'}, status=500)

    try:
        data = json.loads(request.body)
        input_string = _read_string(data, 'input', get_setting('MAX_TEXT_LENGTH'), required=False)

        return JsonResponse({
            'accepted': recognize_equal_runs(input_string, push_symbol, pop_symbol),
            'language': f'{push_symbol}^n {pop_symbol}^n'
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Recognition failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
