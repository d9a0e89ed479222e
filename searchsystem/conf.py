from django.conf import settings

DEFAULTS = {
    'DEFAULT_MAX_ERRORS': 1,
    'MAX_PATTERN_LENGTH': 64,
    'MAX_TEXT_LENGTH': 10000,
    'RECOGNIZER_SYMBOLS': ('a', 'b'),
}


def get_setting(name: str):
    """Look up a SEARCHSYSTEM setting, falling back to the built-in default."""
    overrides = getattr(settings, 'SEARCHSYSTEM', {})
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
