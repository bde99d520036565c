"""calcdemo — Tiny example build with an arithmetic utility and a demo entry point.

The entry point picks one of three outputs from build defines resolved once
at import time (the Python stand-in for compiler -D switches).

Usage:
    python -m calcdemo                                   # Banner + arithmetic
    CALCDEMO_DEFINES=PRINTHELLO python -m calcdemo       # Prints HELLO
    CALCDEMO_DEFINES=PRINTBYE python -m calcdemo         # Prints BYE
    CALCDEMO_DEFINES=NAMEDCONSTANTS python -m calcdemo   # Named operands
"""
