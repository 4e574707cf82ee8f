'''
vlogging
========

Logging for the globkit command line.

Adds a LOUD level below DEBUG, which globpath uses to narrate how each pattern
is being matched, and a SILENT level above everything. The level of the
stderr handler is chosen by a flag on the command line:

--loud: LOUD
--debug: DEBUG
--warning: WARNING
--quiet: ERROR
--silent: SILENT
none of the above: INFO
'''
import functools
import logging

from logging import DEBUG
from logging import ERROR
from logging import INFO
from logging import WARNING

LOUD = 1
SILENT = 99999999999

logging.addLevelName(LOUD, 'LOUD')
logging.addLevelName(SILENT, 'SILENT')

ARGV_LEVELS = {
    '--loud': LOUD,
    '--debug': DEBUG,
    '--warning': WARNING,
    '--quiet': ERROR,
    '--silent': SILENT,
}

HANDLER_FORMAT = '{levelname}:{name}:{message}'

def get_logger(name, main_fallback=None):
    '''
    Return the named logger with an extra `loud` method.

    main_fallback replaces the name when the module is being run directly and
    would otherwise log as "__main__".
    '''
    if name == '__main__' and main_fallback is not None:
        name = main_fallback
    log = logging.getLogger(name)
    log.loud = functools.partial(log.log, LOUD)
    return log

def get_level_by_argv(argv):
    '''
    Return (level, remaining_argv). Every level flag is taken out of argv, and
    if there are several, the most verbose one wins.
    '''
    levels = [ARGV_LEVELS[arg] for arg in argv if arg in ARGV_LEVELS]
    remaining = [arg for arg in argv if arg not in ARGV_LEVELS]
    level = min(levels) if levels else INFO
    return (level, remaining)

def install_stderr_handler(level):
    # Leave alone any logging setup that is already in place.
    root = logging.getLogger()
    if root.handlers:
        return

    # Let the handler do the filtering, not the root logger.
    root.setLevel(logging.NOTSET)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(HANDLER_FORMAT, style='{'))
    handler.setLevel(level)
    root.addHandler(handler)

def main_decorator(main):
    '''
    For main(argv) functions: take the level flags out of argv and set up the
    stderr handler before main's argparser sees the rest.
    '''
    @functools.wraps(main)
    def wrapped(argv):
        (level, argv) = get_level_by_argv(argv)
        install_stderr_handler(level)
        return main(argv)
    return wrapped
