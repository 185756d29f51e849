"""
The calculator session: an interactive prompt, or a script runner.

usage: calc [-d] [-t] [script]
    -d  debug mode, trace parsing and evaluation
    -t  test mode, a comment after an expression is its expected answer
"""

import sys
import traceback

from . import config
from .eval import calc_eval
from .format import calc_format
from .objects import ComplexNumber, NONE
from .symbols import SymbolTable
from .errors import CalcError, ParseError
from .utils.debug import log


left_arrow  = '❮'
right_arrow = '='
error_sign  = '👎'


def run(filename=None, test=False, start=0, verbose=True, env=None):
    """
    Evaluate the lines of a script, or of the console if filename is None.

    Returns the list of failed checks of the test mode.
    """
    def get_lines():
        if interactive:
            while True:
                yield input(make_prompt())
        else:
            with open(filename, 'r', encoding='utf8') as f:
                yield from f.read().splitlines()[start:]

    def make_prompt(in_out='in'):
        arrow = left_arrow if in_out == 'in' else right_arrow
        return '$%d %s ' % (count, arrow)

    def verify_answer(line, result, answer):
        expected = calc_eval(answer, SymbolTable())
        if isinstance(result, ComplexNumber) and isinstance(expected, ComplexNumber):
            ok = (result - expected).abs() <= config.tolerance
        else:
            ok = result is expected
        if ok:
            if verbose: print('--- OK! ---')
        else:
            raise Warning('--- Fail! Expected answer of %s is %s, but actual result is %s ---'
                          % (line.strip(), answer, calc_format(result)))

    interactive = filename is None
    if env is None: env = SymbolTable()
    config.test = test
    count, failures = 0, []
    lines = get_lines()

    while True:
        prompt = make_prompt()
        try:
            line = next(lines)
        except (StopIteration, EOFError):
            break
        except KeyboardInterrupt:
            print('\nSee you! 👋')
            break

        try:
            if line.startswith('#TEST') and not test:
                break  # the lines after #TEST are run only in test mode

            line, _, comment = line.partition('#')
            comment = comment.strip()
            if not line.strip():
                continue
            if verbose and not interactive:
                print(prompt + line)

            word = line.strip()
            if word == 'exit':
                raise KeyboardInterrupt
            elif word == 'clear':
                env.clear()
                continue
            elif word == 'dir':
                for var in env.user_variables():
                    print(f'{var.name}: {calc_format(var.value)}')
                continue

            result = calc_eval(line, env)

            if result is not NONE and verbose:
                print(make_prompt('out') + calc_format(result))

            if test and comment:
                verify_answer(line, result, comment)

            count += 1

        except KeyboardInterrupt:
            print('\nSee you! 👋')
            break
        except Warning as w:
            print(w)
            failures.append(str(w))
            if config.debug: raise
        except ParseError as e:
            indent = ' ' * (len(prompt) + e.offset)
            print(indent + '^\n' + indent + str(e))
            if config.debug: traceback.print_exc()
            if test: raise
        except CalcError as e:
            error_prompt = ' ' * (len(prompt) - 3) + error_sign
            print(error_prompt, '%s: %s' % (type(e).__name__, e))
            if config.debug: traceback.print_exc()
            if test: raise

    if test and not failures:
        print('\nCongratulations, tests all passed in "%s"!\n' % filename)
    return failures


def main(argv=None):
    if argv is None: argv = sys.argv[1:]
    argv = list(argv)

    config.debug = '-d' in argv
    test = '-t' in argv
    args = [a for a in argv if a not in ('-d', '-t')]

    if config.debug:
        print('(debug mode)')
        log('argv: %s' % argv)

    filename = args[0] if args else None
    if test and filename is None:
        filename = 'tests/tests.cal'

    try:
        failures = run(filename, test)
    except FileNotFoundError:
        raise FileNotFoundError('script "%s" not found' % filename) from None
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
