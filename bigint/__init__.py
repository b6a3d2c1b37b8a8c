"""
bigint - Integers of any size, in base-1,000,000,000 decimal chunks.

Usage example:

    import bigint

    two = bigint.BigInt(2)
    assert '1267650600228229401496703205376' == str(two.pow(100))

Usage example:

    from bigint import BigInt, power

    x = BigInt(999999999)
    x += 1
    assert (1, 0) == x.digits
    power(3, 40).write()   # prints 12157665459056928801
"""

from .number import BigInt
from .number import PowMethod
from .number import INT64_MAX
from .number import INT64_MIN
from .number import multiply_by_small_int
from .number import power

__all__ = [
    'BigInt',
    'PowMethod',
    'INT64_MAX',
    'INT64_MIN',
    'multiply_by_small_int',
    'power',
]

from . import version
__version__ = version.__doc__
