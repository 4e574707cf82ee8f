'''
Where the globpath command gets its candidate lines from, and where it puts
its results.

Each command line argument is a source of lines:
!i, !in, !input, !stdin: stdin, until EOF.
!c, !clip, !clipboard: the clipboard.
anything else: the argument itself, split into lines.

With no arguments at all, stdin is read if it is a pipe.
'''
# import pyperclip moved to stay lazy.
import itertools
import sys

CLIPBOARD_STRINGS = {'!c', '!clip', '!clipboard'}
INPUT_STRINGS = {'!i', '!in', '!input', '!stdin'}

# Ctrl+Z on a windows terminal.
EOF = '\x1a'

class PipeableException(Exception):
    pass

class NoArguments(PipeableException):
    pass

def read_stdin():
    for line in sys.stdin:
        (line, eof, _) = line.partition(EOF)
        line = line.rstrip('\n')
        if line or not eof:
            yield line
        if eof:
            return

def read_clipboard():
    import pyperclip
    return pyperclip.paste().splitlines()

def source_lines(arg):
    '''
    Return the raw lines of one argument, according to the table above.
    '''
    if not isinstance(arg, str):
        raise TypeError(f'arg should be {str}, not {type(arg)}.')

    source = arg.lower()
    if source in INPUT_STRINGS:
        if sys.stdin.isatty():
            # Let the user finish typing before any results are printed.
            return list(read_stdin())
        return read_stdin()

    if source in CLIPBOARD_STRINGS:
        return read_clipboard()

    return arg.splitlines()

def candidate_lines(args):
    '''
    Yield the stripped, non-blank lines of all the arguments.
    '''
    if isinstance(args, str):
        args = [args]

    if not args:
        if sys.stdin is None or sys.stdin.isatty():
            raise NoArguments()
        args = ['!i']

    lines = itertools.chain.from_iterable(source_lines(arg) for arg in args)
    for line in lines:
        line = line.strip()
        if line:
            yield line

def _write(stream, line):
    # In pythonw, the standard streams are None.
    if stream is None:
        return
    line = str(line)
    if not line.endswith('\n'):
        line += '\n'
    stream.write(line)
    if stream.isatty():
        stream.flush()

def stdout(line=''):
    _write(sys.stdout, line)

def stderr(line=''):
    _write(sys.stderr, line)
