import string


HEXDIGITS = frozenset(string.hexdigits)

# delimiter -> width of each digit group
NOTATIONS = {
    '': 12,
    '-': 2,
    ':': 2,
    '.': 4,
    }

DELIMITERS = frozenset(sep for sep in NOTATIONS if sep)


def delimiters_in(text):
    """Return the set of recognized delimiters that appear in text."""
    return set(DELIMITERS.intersection(text))


def group(digits, width, sep):
    """Join digits in chunks of width characters, separated by sep."""
    return sep.join(digits[i:i + width]
                    for i in range(0, len(digits), width))
