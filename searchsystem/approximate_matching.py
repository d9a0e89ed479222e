"""
Approximate substring search by edit distance.

The table is filled in full, so time and memory are O(len(text) * len(pattern))
per call. There is no banding or bit-parallel shortcut; long texts should be
capped by the caller (see MAX_TEXT_LENGTH in the SEARCHSYSTEM settings).
"""
from typing import List, Optional


def edit_distance_table(text: str, pattern: str) -> List[List[int]]:
    """
    Build the dynamic programming table for matching pattern inside text.

    dp[i][j] is the minimal number of substitutions, insertions and deletions
    needed to align pattern[:j] with a substring of text that ends at
    position i. Row 0 costs one insertion per pattern symbol; column 0 is
    free, so the match may start anywhere in the text.

    Args:
        text: The text to search in
        pattern: The pattern to search for

    Returns:
        List[List[int]]: A (len(text) + 1) x (len(pattern) + 1) table
    """
    if not isinstance(text, str) or not isinstance(pattern, str):
        raise TypeError("Text and pattern must be strings")

    n, m = len(text), len(pattern)
    dp = [[0] * (m + 1) for _ in range(n + 1)]

    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if text[i - 1] == pattern[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j - 1],  # substitution
                                   dp[i][j - 1],      # insertion
                                   dp[i - 1][j])      # deletion

    return dp


def best_match_cost(text: str, pattern: str) -> Optional[int]:
    """
    Lowest alignment cost of pattern against text.

    Only end positions from len(pattern) to len(text) are considered, so
    None is returned when the pattern is longer than the text.
    """
    dp = edit_distance_table(text, pattern)
    m = len(pattern)
    costs = [dp[i][m] for i in range(m, len(text) + 1)]
    return min(costs) if costs else None


def approx_contains(text: str, pattern: str, max_errors: int) -> bool:
    """
    Check whether pattern occurs somewhere in text with at most max_errors edits.

    With max_errors == 0 this is exact substring containment.

    Args:
        text: The text to search in
        pattern: The pattern to search for
        max_errors: The largest edit distance still counted as a match

    Returns:
        bool: True if some alignment ending in text costs at most max_errors
    """
    cost = best_match_cost(text, pattern)
    return cost is not None and cost <= max_errors
