'''
globpath
========

Match slash-separated paths against wildcard patterns.

The pattern is split on its last slash into a directory part and a file part.
The file part is matched with globmatch, so * and ? there work as usual and
are not case sensitive. The directory part is matched according to what it
contains:

**: everything before the first ** is a prefix that the path must start
    with. Any number of directories may follow, including none.
* or ?: the directory part must match in full, and * does not cross a slash.
    a/*/c.txt matches a/b/c.txt but not a/b/x/c.txt.
neither: the directory part must be equal.

A pattern without any wildcards is simply compared to the path.
Backslashes are treated as slashes, and one leading slash is ignored.

Empty paths and empty patterns never match.

On the command line, print the candidates which match the pattern.
Candidates may be given as arguments, or !i to read stdin, or !c to read the
clipboard. With no candidates, a piped stdin is read.

> globpath "src/**/*.py" !i
> globpath "*.jpg" a.jpg b.png --invert
'''
import argparse
import re
import sys

from globkit import globmatch
from globkit import pipeable
from globkit import vlogging

log = vlogging.get_logger(__name__, 'globpath')

SEPARATOR = '/'
RECURSIVE = '**'

class DirectoryMatcher:
    '''
    Matches a whole directory path against one directory pattern containing
    * or ?. Only lives for the duration of a glob_path call, and is not meant
    to be kept around.
    '''
    def __init__(self, segment):
        self.segment = segment
        # Escape everything first so the expression is always valid, then
        # bring back the two wildcards.
        expression = re.escape(segment)
        expression = expression.replace(r'\*', '[^/]*')
        expression = expression.replace(r'\?', '.')
        self._regex = re.compile(expression)

    def __repr__(self):
        return f'DirectoryMatcher({self.segment!r})'

    def matches(self, directory) -> bool:
        return self._regex.fullmatch(directory) is not None

def compile_directory_pattern(segment) -> DirectoryMatcher:
    return DirectoryMatcher(segment)

def normalize(path) -> str:
    '''
    Turn backslashes into slashes and remove one leading slash.
    Only one, so '//server/share' becomes '/server/share'.
    '''
    path = path.replace('\\', SEPARATOR)
    if path.startswith(SEPARATOR):
        path = path[1:]
    return path

def split_on_last(text, separator=SEPARATOR) -> tuple:
    '''
    Return (head, tail) split around the last separator. If the separator is
    not in the text, head is None and tail is the whole text.

    >>> split_on_last('a/b/c.txt')
    ('a/b', 'c.txt')
    >>> split_on_last('c.txt')
    (None, 'c.txt')
    '''
    (head, found, tail) = text.rpartition(separator)
    if not found:
        return (None, text)
    return (head, tail)

def _directory_matches(path, directory, directory_pattern) -> bool:
    if RECURSIVE in directory_pattern:
        prefix = directory_pattern.split(RECURSIVE, 1)[0].rstrip('*' + SEPARATOR)
        log.loud('Recursive directory %r, prefix %r.', directory_pattern, prefix)
        # The whole path, not only the directory part.
        return path.startswith(prefix)

    if globmatch.is_glob(directory_pattern):
        matcher = compile_directory_pattern(directory_pattern)
        log.loud('Single level directory %r.', matcher)
        return matcher.matches(directory)

    return directory == directory_pattern

def glob_path(candidate_path, pattern) -> bool:
    '''
    Return True if the candidate path matches the pattern.
    See the module docstring for the rules.
    '''
    if not candidate_path or not pattern:
        return False

    path = normalize(candidate_path)
    pattern = normalize(pattern)

    if not globmatch.is_glob(pattern):
        return path == pattern

    (directory, filename) = split_on_last(path)
    if directory is None:
        log.loud('%r is a single segment, matching it flat.', path)
        return globmatch.glob(path, pattern)

    (directory_pattern, filename_pattern) = split_on_last(pattern)
    if directory_pattern is None:
        return globmatch.glob(filename, pattern)

    if not _directory_matches(path, directory, directory_pattern):
        return False

    return globmatch.glob(filename, filename_pattern)

def glob_path_any(candidate_path, patterns) -> bool:
    return any(glob_path(candidate_path, pattern) for pattern in patterns)

def glob_path_filter(candidate_paths, pattern) -> list:
    return [path for path in candidate_paths if glob_path(path, pattern)]

def globpath_argparse(args):
    matcher = globmatch.glob if args.flat else glob_path
    log.debug('Matching against %r with %s.', args.pattern, matcher.__name__)

    lines = pipeable.candidate_lines(args.candidates)
    count = 0
    try:
        for line in lines:
            if matcher(line, args.pattern) == args.invert:
                continue
            count += 1
            if not args.count:
                pipeable.stdout(line)
    except pipeable.NoArguments:
        pipeable.stderr('No candidates given. Pass them as arguments, or !i to read stdin.')
        return 1
    except KeyboardInterrupt:
        return 1

    if args.count:
        pipeable.stdout(count)

    return 0 if count else 1

@vlogging.main_decorator
def main(argv):
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('pattern')
    parser.add_argument('candidates', nargs='*')
    parser.add_argument(
        '--flat',
        action='store_true',
        help='''
        Match each candidate as one flat string, where slashes are not special.
        ''',
    )
    parser.add_argument(
        '--invert',
        action='store_true',
        help='''
        Print the candidates which do not match.
        ''',
    )
    parser.add_argument(
        '--count',
        action='store_true',
        help='''
        Print only the number of candidates that would have been printed.
        ''',
    )
    parser.set_defaults(func=globpath_argparse)

    args = parser.parse_args(argv)
    return args.func(args)

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
