def check_recognizer_symbols(push_symbol: str, pop_symbol: str) -> None:
    """Raise ValueError unless the push and pop symbols are two distinct single characters."""
    for name, symbol in (('Push', push_symbol), ('Pop', pop_symbol)):
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"{name} symbol must be a single character, got {symbol!r}")
    if push_symbol == pop_symbol:
        raise ValueError(f"Push and pop symbols must differ, got '{push_symbol}' twice")


def recognize_equal_runs(input_string: str, push_symbol: str = 'a', pop_symbol: str = 'b') -> bool:
    """
    Recognise the language push_symbol^n pop_symbol^n for n >= 0.

    A leading run of push_symbol pushes one marker each onto a stack; the rest
    of the input must be pop_symbol only, each popping one marker. The input
    is read once, left to right.

    Args:
        input_string: The string to test
        push_symbol: The symbol of the first run, 'a' by default
        pop_symbol: The symbol of the second run, 'b' by default

    Returns:
        bool: True if the whole input was consumed and the stack is empty

    Raises:
        ValueError: If the symbols are not two distinct single characters
    """
    check_recognizer_symbols(push_symbol, pop_symbol)

    stack = []
    position = 0

    # Push phase
    while position < len(input_string) and input_string[position] == push_symbol:
        stack.append(push_symbol)
        position += 1

    # Pop phase
    while position < len(input_string) and input_string[position] == pop_symbol:
        if not stack:
            return False
        stack.pop()
        position += 1

    return position == len(input_string) and not stack
