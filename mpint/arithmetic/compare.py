"""Three-way ordering of signed magnitudes."""

from ..words.store import Words


def compare_magnitude(a: Words, b: Words) -> int:
    """Compare two normalized magnitudes, ignoring sign. Returns -1, 0, or 1."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


def compare(a_sign: bool, a: Words, b_sign: bool, b: Words) -> int:
    """Compare two normalized signed values. The ordering returned is:
        -1 iff a < b
         0 iff a = b
         1 iff a > b
    """
    if len(a) > len(b):
        return 1 if a_sign else -1
    elif len(a) < len(b):
        return -1 if b_sign else 1
    elif a_sign != b_sign:
        return 1 if a_sign else -1

    order = compare_magnitude(a, b)
    if a_sign:
        return order
    else:
        return -order
