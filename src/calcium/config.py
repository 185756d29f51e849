# settings of the calculator, mutated by calc.py at startup

debug = False       # log traces of parsing and evaluation
test = False        # verify the expected answers written in scripts
precision = 10      # significant digits shown for non-integers
tolerance = 1e-9    # absolute tolerance when verifying answers
