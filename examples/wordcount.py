"""
Classic MapReduce word count example.
Counts the frequency of each word in the input text.
"""

import string


def map_fn(token):
    """
    Map function: emit (word, 1) for a single token.

    Args:
        token: Whitespace-delimited token from the input file

    Returns:
        (word, 1) tuple
    """
    word = token.translate(str.maketrans('', '', string.punctuation)).lower()
    return (word, 1)


def reduce_fn(key, values):
    """Reduce function: print the total count for a word."""
    print(f"{key}\t{sum(values)}")
