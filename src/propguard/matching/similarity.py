"""
Edit distance between prop names.
"""


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert, delete and substitute costs.

    Case-sensitive. Uses two rows of the dynamic programming table, iterating
    over the shorter string in the inner loop.

    Examples:
        >>> edit_distance('foobbar', 'foobar')
        1
        >>> edit_distance('kitten', 'sitting')
        3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,                        # deletion
                current[j - 1] + 1,                     # insertion
                previous[j - 1] + (char_a != char_b),   # substitution
            ))
        previous = current
    return previous[-1]
