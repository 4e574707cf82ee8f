'''
globmatch
=========

Match a flat string against a wildcard pattern.

? matches exactly one character.
* matches zero or more characters.

There are no character classes, and every other character is a literal that
is compared case-insensitively. Path separators have no special meaning here,
see globpath for that.

Every string is a legal pattern, so these functions never raise for string
input. A pattern that can't match just returns False.

>>> glob('Report.TXT', '*.txt')
True
>>> glob('abc', 'a?')
False
'''
from globkit import caseless

WILDCARDS = {'*', '?'}

def glob(candidate, pattern) -> bool:
    '''
    Return True if the candidate matches the pattern in its entirety.

    The pattern is walked from its last character back to its first. For
    each pattern position we keep one row of booleans, where row[c] says
    whether pattern[p:] matches candidate[c:]. The row for the end of the
    pattern is True only at the end of the candidate.

    A * at position p matches candidate[c:] if the rest of the pattern
    matches any suffix starting at c or later. The row is filled by scanning
    those suffixes from the end of the candidate back toward the start, so
    each cell is the previous cell or'd with the row below.

    A naive recursive matcher takes exponential time on patterns like
    *a*a*a*a*b against a long run of a, and needs one stack frame per *.
    This takes len(pattern) * len(candidate) steps and constant stack.
    '''
    candidate_length = len(candidate)

    # Matches of the empty pattern remainder.
    below = [False] * (candidate_length + 1)
    below[candidate_length] = True

    for p in range(len(pattern) - 1, -1, -1):
        symbol = pattern[p]

        if symbol == '*':
            # A run of stars matches exactly what a single star does.
            if p + 1 < len(pattern) and pattern[p + 1] == '*':
                continue

            row = [False] * (candidate_length + 1)
            found = False
            for c in range(candidate_length, -1, -1):
                found = found or below[c]
                row[c] = found

        else:
            row = [False] * (candidate_length + 1)
            for c in range(candidate_length):
                if not below[c + 1]:
                    continue
                if symbol == '?' or caseless.chars_equal(symbol, candidate[c]):
                    row[c] = True

            # Nothing to the left can match either.
            if not any(row):
                return False

        below = row

    return below[0]

matches = glob

def glob_any(candidate, patterns) -> bool:
    '''
    Return True if the candidate matches any of the patterns.
    '''
    return any(glob(candidate, pattern) for pattern in patterns)

def glob_filter(candidates, pattern) -> list:
    '''
    Return the candidates which match the pattern, in their original order.
    '''
    return [candidate for candidate in candidates if glob(candidate, pattern)]

def is_glob(pattern) -> bool:
    return not WILDCARDS.isdisjoint(pattern)
