"""
Reverse Power - raise a number to the power of its own digits reversed.

    $ bigint-reverse-power
    Please input an positive integer to get power result (0 - 99999): 12
    Result: 12^21 is 46005119909369701466112
"""

import logging
import sys

from .number import BigInt
from .number import power


logger = logging.getLogger(__name__)

INPUT_MIN = 0
INPUT_MAX = 99999
DIGITAL_BASE = 10

PROMPT = "Please input an positive integer to get power result ({min} - {max}): ".format(
    min=INPUT_MIN,
    max=INPUT_MAX,
)


class InputError(ValueError):
    """e.g. 'abc' or end-of-file where an integer was expected"""


def reverse_digits(n):
    """
    The digits of n in reverse order, as an int.

        assert 321 == reverse_digits(123)
        assert 21 == reverse_digits(120)

    Each time a digit is peeled off the low end, the digits already
    peeled are worth ten times more.  Their sum is the reversal.
    Negative n is not reversed.
    """
    if n < 0:
        logger.error("Cannot reverse the digits of a negative integer: %d", n)
        return n
    peeled = []
    dividend = n
    while True:
        peeled = [digit * DIGITAL_BASE for digit in peeled]
        dividend, remainder = divmod(dividend, DIGITAL_BASE)
        peeled.append(remainder)
        if dividend == 0:
            break
    return sum(peeled)
assert 321 == reverse_digits(123)
assert 0 == reverse_digits(0)


def read_exponent_base(stdin, stdout):
    """Prompt until the user enters an integer from INPUT_MIN to INPUT_MAX."""
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if line == '':
            raise InputError("No input")
        try:
            n = int(line.strip())
        except ValueError:
            raise InputError("Not an integer: {}".format(repr(line.strip())))
        if INPUT_MIN <= n <= INPUT_MAX:
            return n
        logger.warning("Rejected input %d, outside %d to %d", n, INPUT_MIN, INPUT_MAX)
        stdout.write("Only positive integers are accepted!\n")


def main(stdin=None, stdout=None, stderr=None):
    """Console entry point.  Return the process exit status."""
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    try:
        n = read_exponent_base(stdin, stdout)
    except InputError as e:
        logger.error("Input failed: %s", e)
        stderr.write("There is something wrong when getting your input!\n")
        return 1
    reversed_n = reverse_digits(n)
    stdout.write("Result: {n}^{r} is ".format(n=n, r=reversed_n))
    power(BigInt(n), BigInt(reversed_n)).write(stdout)
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
