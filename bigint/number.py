"""
BigInt Numbers

Signed integers of any size, stored as base-1,000,000,000 chunks.
Features:
 - arbitrary magnitude
 - exact decimal rendering (each chunk is 9 decimal digits)
 - addition, subtraction, multiplication, exponentiation, comparison
"""

import numbers
import operator
import re
import sys


INT64_MAX = 2 ** 63 - 1
INT64_MIN = -2 ** 63


class PowMethod(object):
    """Option for BigInt.pow()."""
    REPEATED = 'repeated'   # e multiplications
    SQUARING = 'squaring'   # about 2*log2(e) multiplications


class BigInt(numbers.Number):
    """
    An integer of any size, sign plus magnitude.

    The magnitude is a list of chunks.  Each chunk is a base-10**9 digit,
    that is, a group of 9 decimal digits, 0 through 999999999.

        assert (1, 0) == BigInt(1000000000).digits
        assert (123, 456789012) == BigInt(123456789012).digits
        assert '-123456789012' == str(BigInt(-123456789012))

    Chunks are stored least significant first, so carries grow the list at
    the end.  The digits property shows them most significant first, the
    way they are written.

    Canonical form
    --------------
    There is never a leading zero chunk, except that zero itself is the
    single chunk 0.  Zero is always positive, there is no -0.

    Mutability
    ----------
    Binary operators (+, -, *) return a new BigInt.  Compound assignment
    (+=, -=, *=) and inc(), dec() modify the BigInt in place.  No two
    BigInt instances ever share a chunk list.
    """

    __slots__ = ('_chunks', '_is_positive')

    CHUNK_DIGITS = 9
    CHUNK_BASE = 10 ** CHUNK_DIGITS
    CHUNK_MAX = CHUNK_BASE - 1

    POW_METHOD = PowMethod.SQUARING

    def __init__(self, content=0):
        """
        BigInt constructor.

        content - the type can be:
            int               10**100
            decimal string    '-1000000000000'
            another BigInt    BigInt(42)

        See from_chunks() to construct from base-10**9 digits.
        """
        if isinstance(content, BigInt):
            self._from_another_bigint(content)
        elif isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, str):
            self._from_string(content)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. BigInt(3.5) or BigInt(None)"""

    class ConstructorValueError(ValueError):
        """e.g. BigInt('twelve') or BigInt('0x1F')"""

    class RepresentationError(ValueError):
        """e.g. BigInt.from_chunks([]) or BigInt.from_chunks([1, 1000000000]) or BigInt.from_chunks([0, 1])"""

    class NegativeExponentError(ValueError):
        """e.g. BigInt(2).pow(-1)"""

    def _from_another_bigint(self, another_bigint):
        """
        Copy Constructor

            assert BigInt(1) == BigInt(BigInt(1))

        The copy gets its own chunk list.
        """
        self._chunks = list(another_bigint._chunks)
        self._is_positive = another_bigint._is_positive

    def _from_int(self, i):
        """Fill in chunks from an int, by repeated division by CHUNK_BASE."""
        # NOTE:  INT64_MIN needs no special case, negating a Python int never overflows.
        self._is_positive = i >= 0
        magnitude = i if self._is_positive else -i
        chunks = []
        while True:
            magnitude, chunk = divmod(magnitude, self.CHUNK_BASE)
            chunks.append(chunk)
            if magnitude == 0:
                break
        self._chunks = chunks

    DECIMAL_PATTERN = re.compile(r'^([+-]?)([0-9]+(?:_[0-9]+)*)$')

    def _from_string(self, s):
        """
        Fill in chunks from a decimal string.

        Underscores may separate digits, the way int() allows:  '1_000_000'
        """
        match = self.DECIMAL_PATTERN.match(s.strip())
        if match is None:
            raise self.ConstructorValueError("BigInt({}) is not a decimal integer".format(repr(s)))
        sign, digits = match.groups()
        digits = digits.replace('_', '').lstrip('0') or '0'
        chunks = []
        for end in range(len(digits), 0, -self.CHUNK_DIGITS):
            start = max(0, end - self.CHUNK_DIGITS)
            chunks.append(int(digits[start:end]))
        self._chunks = chunks
        self._is_positive = sign != '-'
        self._normalize_zero()

    @classmethod
    def from_chunks(cls, chunks, is_positive=True):
        """
        Construct a BigInt from its base-10**9 digits, most significant first.

            assert BigInt(-3000000007) == BigInt.from_chunks([3, 7], is_positive=False)

        Raise RepresentationError if the chunks are not canonical.
        """
        chunks = list(chunks)
        if len(chunks) == 0:
            raise cls.RepresentationError("A BigInt needs at least one chunk.")
        for chunk in chunks:
            if not isinstance(chunk, int) or isinstance(chunk, bool):
                raise cls.RepresentationError("Chunks must be int, not {}".format(type_name(chunk)))
            if not 0 <= chunk <= cls.CHUNK_MAX:
                raise cls.RepresentationError("Chunk {chunk} is outside 0 to {max}".format(
                    chunk=chunk,
                    max=cls.CHUNK_MAX,
                ))
        if len(chunks) > 1 and chunks[0] == 0:
            raise cls.RepresentationError("Leading zero chunk in {}".format(chunks))
        chunks.reverse()
        return cls._from_internal(chunks, bool(is_positive))

    @classmethod
    def _from_internal(cls, chunks_least_first, is_positive):
        """Wrap a chunk list (least significant first) that no one else holds."""
        new_bigint = cls.__new__(cls)
        new_bigint._chunks = chunks_least_first
        new_bigint._is_positive = is_positive
        new_bigint._strip_leading_zeros()
        new_bigint._normalize_zero()
        return new_bigint

    @property
    def digits(self):
        """
        The base-10**9 digits, most significant first.

            assert (18, 446744073, 709551616) == BigInt(2**64).digits
        """
        return tuple(reversed(self._chunks))

    def __repr__(self):
        """Handle repr(BigInt(x))"""
        return "BigInt('{}')".format(self)

    def __str__(self):
        """
        Decimal rendering.

        The first (most significant) chunk is not padded.  Every other chunk is padded to 9 digits.
        So BigInt(1000000007) is '1' + '000000007'
        """
        chunks = self.digits
        parts = [str(chunks[0])]
        for chunk in chunks[1:]:
            parts.append('{chunk:0{width}d}'.format(chunk=chunk, width=self.CHUNK_DIGITS))
        sign = '' if self._is_positive else '-'
        return sign + ''.join(parts)

    def write(self, sink=None):
        """Render to a text stream (stdout by default), with a line break."""
        if sink is None:
            sink = sys.stdout
        sink.write(str(self) + '\n')

    # Normalization
    # -------------
    def _strip_leading_zeros(self):
        """Drop zero chunks from the most significant end, all but the last one."""
        chunks = self._chunks
        while len(chunks) > 1 and chunks[-1] == 0:
            chunks.pop()

    def _normalize_zero(self):
        """There is no -0."""
        if self.is_zero():
            self._is_positive = True

    def is_zero(self):
        """Is this BigInt zero?"""
        return len(self._chunks) == 1 and self._chunks[0] == 0

    def is_positive(self):
        """
        Is the sign positive?

        NOTE:  Zero counts as positive.  It's the sign flag, not x > 0.
        """
        return self._is_positive

    def is_negative(self):
        """Is this BigInt less than zero?"""
        return not self._is_positive

    # Comparison
    # ----------
    def _abs_less(self, other):
        """Is the magnitude of self less than the magnitude of other?"""
        if len(self._chunks) != len(other._chunks):
            return len(self._chunks) < len(other._chunks)
        for mine, theirs in zip(reversed(self._chunks), reversed(other._chunks)):
            if mine != theirs:
                return mine < theirs
        return False

    def _abs_equal(self, other):
        """Do self and other have the same magnitude?"""
        return self._chunks == other._chunks

    def _less(self, other):
        if self._is_positive != other._is_positive:
            return other._is_positive
        if self._is_positive:
            return self._abs_less(other)
        else:
            return other._abs_less(self)

    def _equal(self, other):
        return self._is_positive == other._is_positive and self._abs_equal(other)

    def __eq__(self, other):
        """Handle BigInt(x) == something"""
        return self._ordered(other, lambda a, b: a._equal(b))

    def __ne__(self, other):
        """Handle BigInt(x) != something"""
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other): return self._ordered(other, lambda a, b: a._less(b))
    def __le__(self, other): return self._ordered(other, lambda a, b: a._less(b) or a._equal(b))
    def __gt__(self, other): return self._ordered(other, lambda a, b: b._less(a))
    def __ge__(self, other): return self._ordered(other, lambda a, b: not a._less(b))

    def _ordered(self, other, predicate):
        """Compare self with something that can be a BigInt."""
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        return predicate(self, other_ready)

    @classmethod
    def _op_ready(cls, x):
        """
        Get x ready to be an operand.

        int and BigInt are ready.  Anything else gets NotImplemented, so e.g.
        BigInt(1) + 1.5 raises TypeError and BigInt(1) == 'one' is False.
        Strings are not operands, even though the constructor takes them.
        """
        if isinstance(x, BigInt):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            return NotImplemented

    def __hash__(self):
        """Equal BigInt and int values hash the same."""
        return hash(int(self))

    # Conversion
    # ----------
    def __int__(self):
        """Convert to a Python int."""
        magnitude = 0
        for chunk in reversed(self._chunks):
            magnitude = magnitude * self.CHUNK_BASE + chunk
        return magnitude if self._is_positive else -magnitude

    def __bool__(self):
        return not self.is_zero()

    # Math
    # ----
    def __neg__(self):
        negated = type(self)(self)
        negated._is_positive = not self._is_positive
        negated._normalize_zero()
        return negated

    def __pos__(self):
        return type(self)(self)

    def __abs__(self):
        magnitude = type(self)(self)
        magnitude._is_positive = True
        return magnitude

    def __add__(self, other): return self._binary_op(operator.__iadd__, self, other)
    def __radd__(self, other): return self._binary_op(operator.__iadd__, other, self)
    def __sub__(self, other): return self._binary_op(operator.__isub__, self, other)
    def __rsub__(self, other): return self._binary_op(operator.__isub__, other, self)
    def __mul__(self, other): return self._binary_op(operator.__imul__, self, other)
    def __rmul__(self, other): return self._binary_op(operator.__imul__, other, self)

    @classmethod
    def _binary_op(cls, in_place_op, input_left, input_right):
        """Two-input operator - copy the left operand, then apply the in-place version to the copy."""
        left = cls._op_ready(input_left)
        right = cls._op_ready(input_right)
        if left is NotImplemented or right is NotImplemented:
            return NotImplemented
        return in_place_op(cls(left), right)

    def __iadd__(self, other):
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        self._signed_add(other_ready)
        return self

    def __isub__(self, other):
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        self._signed_add(-other_ready)
        return self

    def __imul__(self, other):
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        product = self._multiply(other_ready)
        self._chunks = product._chunks
        self._is_positive = product._is_positive
        return self

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        if not isinstance(exponent, (int, BigInt)):
            return NotImplemented
        return self.pow(exponent)

    def inc(self):
        """Add one, in place, like ++x."""
        self += 1
        return self

    def dec(self):
        """Subtract one, in place, like --x."""
        self -= 1
        return self

    def post_inc(self):
        """Add one, in place, like x++.  Return the old value."""
        old_value = type(self)(self)
        self.inc()
        return old_value

    def post_dec(self):
        """Subtract one, in place, like x--.  Return the old value."""
        old_value = type(self)(self)
        self.dec()
        return old_value

    def _signed_add(self, other):
        """
        self += other, minding signs.

        Same signs add magnitudes.  Differing signs subtract the smaller magnitude from the
        larger, and the result takes the sign of whichever operand had the larger magnitude.
        """
        if other is self:
            other = type(self)(other)
        if self._is_positive == other._is_positive:
            self._abs_plus(other)
        else:
            self_is_smaller = self._abs_less(other)
            self._abs_minus(other)
            if self._is_positive:
                self._is_positive = not self_is_smaller
            else:
                self._is_positive = self_is_smaller
        self._normalize_zero()

    def _abs_plus(self, other):
        """Add the magnitude of other to the magnitude of self.  Sign is untouched."""
        mine = self._chunks
        theirs = other._chunks
        if len(mine) < len(theirs):
            mine.extend([0] * (len(theirs) - len(mine)))
        carry = 0
        for index in range(len(mine)):
            if index >= len(theirs) and carry == 0:
                break
            total = mine[index] + carry
            if index < len(theirs):
                total += theirs[index]
            carry, mine[index] = divmod(total, self.CHUNK_BASE)
        if carry > 0:
            mine.append(carry)

    def _abs_minus(self, other):
        """
        Replace the magnitude of self with the difference of the two magnitudes.

        The smaller magnitude is always subtracted from the larger.  Sign is untouched.

        Example borrow:  1_000000000 - 1 = 0_999999999, and the leading 0 chunk is stripped.
        """
        if self._abs_less(other):
            larger = list(other._chunks)
            smaller = self._chunks
        else:
            larger = self._chunks
            smaller = other._chunks
        borrow = 0
        for index in range(len(larger)):
            if index >= len(smaller) and borrow == 0:
                break
            difference = larger[index] - borrow
            if index < len(smaller):
                difference -= smaller[index]
            if difference < 0:
                difference += self.CHUNK_BASE
                borrow = 1
            else:
                borrow = 0
            larger[index] = difference
        assert borrow == 0, "Borrowed past the most significant chunk of {}".format(larger)
        self._chunks = larger
        self._strip_leading_zeros()

    def _multiply(self, other):
        """
        Schoolbook long multiplication in base 10**9.  Return a new BigInt.

        Each chunk of other, least significant first, multiplies the whole magnitude of self.
        After each chunk the multiplicand shifts one chunk left (times 10**9).
        """
        cls = type(self)
        product = cls(0)
        if self.is_zero() or other.is_zero():
            return product
        multiplicand = abs(self)
        for chunk in list(other._chunks):
            if chunk != 0:
                product += multiply_by_small_int(multiplicand, chunk)
            multiplicand._chunks.insert(0, 0)
        product._is_positive = self._is_positive == other._is_positive
        return product

    # Exponentiation
    # --------------
    def pow(self, exponent):
        """
        Raise to a non-negative integer power.

            assert BigInt(1024) == BigInt(2).pow(10)
            assert BigInt(1) == BigInt(0).pow(0)

        exponent - int or BigInt
        Raise NegativeExponentError if exponent is negative.
        """
        if isinstance(exponent, BigInt):
            exponent = int(exponent)
        elif not isinstance(exponent, int):
            raise TypeError("Exponent must be int or BigInt, not {}".format(type_name(exponent)))
        if exponent < 0:
            raise self.NegativeExponentError("Exponent should not be negative: {}".format(exponent))
        if self.POW_METHOD == PowMethod.REPEATED:
            return self._pow_by_repeated_multiplication(exponent)
        else:
            return self._pow_by_squaring(exponent)

    def _pow_by_repeated_multiplication(self, exponent):
        result = type(self)(1)
        for _ in range(exponent):
            result *= self
        return result

    def _pow_by_squaring(self, exponent):
        result = type(self)(1)
        square = type(self)(self)
        while exponent > 0:
            if exponent & 1:
                result *= square
            exponent >>= 1
            if exponent > 0:
                square *= square
        return result


def multiply_by_small_int(multiplicand, k):
    """
    Multiply a BigInt by an int that fits in one chunk.  Return a new BigInt.

        assert BigInt(2000000000) == multiply_by_small_int(BigInt(1000000000), 2)

    -10**9 < k < 10**9.  A negative k flips the sign.
    Each chunk product, chunk * k + carry, stays under 10**18.
    """
    if not isinstance(k, int):
        raise TypeError("Small multiplier must be int, not {}".format(type_name(k)))
    if not -multiplicand.CHUNK_BASE < k < multiplicand.CHUNK_BASE:
        raise ValueError("Small multiplier {} does not fit in one chunk".format(k))
    chunks = []
    carry = 0
    for chunk in multiplicand._chunks:
        carry, low_chunk = divmod(chunk * abs(k) + carry, multiplicand.CHUNK_BASE)
        chunks.append(low_chunk)
    if carry > 0:
        chunks.append(carry)
    is_positive = multiplicand.is_positive() == (k >= 0)
    return type(multiplicand)._from_internal(chunks, is_positive)


def power(base, exponent):
    """base.pow(exponent), for a base that may be an int."""
    if not isinstance(base, BigInt):
        base = BigInt(base)
    return base.pow(exponent)


# Inspection
# ----------
def type_name(x):
    """Describe (very briefly) what type of object this is."""
    return type(x).__name__
assert 'int' == type_name(3)
assert 'list' == type_name([])
assert 'function' == type_name(type_name)
