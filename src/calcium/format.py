import math
from .objects import ComplexNumber, NONE
from .utils.debug import log
from . import config


supscripts = '⁰¹²³⁴⁵⁶⁷⁸⁹'


class Formatter:
    """
    Render values in decimal for the calculator session.

    >>> calc_format(ComplexNumber(3, -2))
    '3-2i'
    >>> calc_format(ComplexNumber(0.25, 1))
    '0.25+i'
    >>> calc_format(ComplexNumber(0.00002))
    '(2×10⁻⁵)'
    """

    def format(self, val):
        if val is NONE:
            return 'None'
        elif isinstance(val, ComplexNumber):
            return self.format_number(val)
        else:
            return str(val)

    def format_float(self, x):
        prec = config.precision
        return float(f'%.{prec}g' % x)

    def format_scinum(self, x):
        def pos_supscript(n):
            return ''.join([supscripts[int(i)] for i in str(n)])
        def supscript(n):
            return '⁻' + pos_supscript(-n) if n < 0 else pos_supscript(n)
        def positive_case(x):
            e = math.floor(math.log10(x))
            b = self.format_float(x / 10 ** e)
            if b == 10:  # rounded up to the next power
                b, e = 1.0, e + 1
            if b.is_integer(): b = int(b)
            return f"{b}×10{supscript(e)}"
        if x > 0:
            return '(%s)' % positive_case(x)
        else:
            return '(-%s)' % positive_case(-x)

    def format_real(self, x):
        if math.isnan(x):
            return 'NaN'
        elif math.isinf(x):
            return '∞' if x > 0 else '-∞'
        elif x.is_integer() and abs(x) < 1e7:
            return '%d' % x
        elif abs(x) >= 1e7 or abs(x) < 1e-3:
            return self.format_scinum(x)
        else:
            return str(self.format_float(x))

    def format_number(self, z):
        re, im = z.real, z.imag
        if re == 0.0 and im == 0.0:
            return self.format_real(0.0)

        if im == 1.0: imag = 'i'
        elif im == -1.0: imag = '-i'
        elif im == 0.0: imag = ''
        else: imag = self.format_real(im) + 'i'

        s = ''
        if re != 0.0:
            s = self.format_real(re)
            if im > 0.0 or im < 0.0 and imag[0] == '(':
                s += '+'
        return s + imag


calc_formatter = Formatter()
calc_format = calc_formatter.format

log.format = calc_format
