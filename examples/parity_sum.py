"""
Sums the integers of the input, split by parity.
Prints one line per parity, e.g. "True: 6" for the even numbers.
"""

from mapreduce_engine.errors import ItemError


def map_fn(token):
    """
    Map function: key each integer by whether it is even.

    Args:
        token: Whitespace-delimited token from the input file

    Returns:
        (is_even, value) tuple, or an ItemError for tokens that aren't integers
    """
    try:
        value = int(token)
    except ValueError:
        return ItemError(f"not an integer: {token!r}", item=token)
    return (value % 2 == 0, value)


def reduce_fn(key, values):
    """Reduce function: print the sum for one parity."""
    print(f"{key}: {sum(values)}")
