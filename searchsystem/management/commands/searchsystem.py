import logging

from django.core.management.base import BaseCommand, CommandError

from searchsystem.approximate_matching import approx_contains
from searchsystem.conf import get_setting
from searchsystem.formatting import format_transition_table
from searchsystem.fsa_construction import build_nfa
from searchsystem.fsa_simulation import dfa_accepts, nfa_accepts
from searchsystem.fsa_transformations import nfa_to_dfa
from searchsystem.pda_recognition import recognize_equal_runs

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = (
        "Interactive formal language simulator: builds the NFA and DFA of a literal "
        "pattern, tests a string against both, searches a sequence approximately "
        "and runs the a^n b^n recognizer."
    )

    def add_arguments(self, parser):
        parser.add_argument('--pattern', help='Literal pattern (prompted for when omitted)')
        parser.add_argument('--text', help='String for exact matching')
        parser.add_argument('--sequence', help='DNA sequence for approximate matching')
        parser.add_argument('--pda-input', dest='pda_input', help='String for the a^n b^n recognizer')
        parser.add_argument('--max-errors', dest='max_errors', type=int,
                            help='Edit budget for approximate matching')

    def _ask(self, options, key, prompt):
        value = options.get(key)
        if value is None:
            self.stdout.write(prompt, ending='')
            self.stdout.flush()
            try:
                value = input().strip()
            except EOFError:
                raise CommandError(f"No value for --{key.replace('_', '-')}: input ended")
        return value

    def handle(self, *args, **options):
        max_errors = options.get('max_errors')
        if max_errors is None:
            max_errors = get_setting('DEFAULT_MAX_ERRORS')
        if max_errors < 0:
            raise CommandError('--max-errors must be a non-negative integer')

        self.stdout.write("=== Formal Language Simulator ===")

        pattern = self._ask(options, 'pattern', "\nEnter regex (literal concatenation): ")
        if len(pattern) > get_setting('MAX_PATTERN_LENGTH'):
            raise CommandError(f"Pattern is longer than {get_setting('MAX_PATTERN_LENGTH')} characters")

        nfa = build_nfa(pattern)
        self.stdout.write("\n" + format_transition_table(nfa, 'NFA'))

        dfa = nfa_to_dfa(nfa)
        self.stdout.write("\n" + format_transition_table(dfa, 'DFA'))

        test_string = self._ask(options, 'text', "\nEnter string for exact match: ")
        self.stdout.write("NFA ACCEPT" if nfa_accepts(nfa, test_string) else "NFA REJECT")
        self.stdout.write("DFA ACCEPT" if dfa_accepts(dfa, test_string) else "DFA REJECT")

        sequence = self._ask(options, 'sequence', "\nEnter DNA sequence for approximate matching: ")
        if len(sequence) > get_setting('MAX_TEXT_LENGTH'):
            raise CommandError(f"Sequence is longer than {get_setting('MAX_TEXT_LENGTH')} characters")
        if approx_contains(sequence, pattern, max_errors):
            self.stdout.write("Approximate match found")
        else:
            self.stdout.write("No approximate match")

        push_symbol, pop_symbol = get_setting('RECOGNIZER_SYMBOLS')
        pda_input = self._ask(options, 'pda_input',
                              f"\nEnter string for PDA test ({push_symbol}^n {pop_symbol}^n): ")
        try:
            accepted = recognize_equal_runs(pda_input, push_symbol, pop_symbol)
        except ValueError as e:
            raise CommandError(str(e))
        self.stdout.write("PDA ACCEPT (Context-Free Language)" if accepted else "PDA REJECT")

        logger.info("Simulator run finished for pattern of length %d", len(pattern))
