import sys
from functools import wraps
from .. import config


def log(*messages, debug=True, end='\n', sep='',
        indent='default', file='default'):
    if not config.debug and debug:
        return
    if file == 'default':
        file = log.file
    if indent == 'default':
        indent = log.indent

    message = sep.join(map(log.format, messages))
    file.write(indent * ' ' + message + end)


log.indent = 0
log.format = str
log.file = sys.stderr


def trace(f):
    "Log info before and after the call of a function."
    @wraps(f)
    def _f(*args):
        if not config.debug:
            return f(*args)

        signature = format_call(f, args)
        log('%s:' % signature)
        log.indent += 2
        try:
            result = f(*args)
            log.indent -= 2
        except Exception as e:
            log.indent -= 2
            log(signature, ' exited due to %s' % (str(e) or type(e).__name__))
            raise
        log(f'{signature} ==> {log.format(result)}')
        return result
    return _f


def disabled(f, *ignore): return f  # used to disable a decorator


def format_call(f, args):
    return '%s%s' % (f.__name__, tuple(args))
