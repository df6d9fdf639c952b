# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" IEEE754 Floating Point Library: formats, decoding and GRS records.

software (bit-accurate) model: every value is a plain python int,
field widths are enforced by the format.
"""

from enum import Enum, unique
import math

from nmigen.hdl.ast import Const


@unique
class OperandCategory(Enum):
    """ classification of a decoded operand, from its bit-pattern alone
    """
    ZERO = 0
    SUBNORMAL = 1
    NORMAL = 2
    INFINITY = 3
    NAN = 4


class FPFormat:
    """ Class describing binary floating-point formats based on IEEE 754.

    :attribute e_width: the number of bits in the exponent field.
    :attribute m_width: the number of bits stored in the mantissa
        field (the implicit bit is not stored).
    """

    def __init__(self, e_width, m_width):
        """ Create ``FPFormat`` instance. """
        self.e_width = e_width
        self.m_width = m_width

    def __eq__(self, other):
        """ Check for equality. """
        if not isinstance(other, FPFormat):
            return NotImplemented
        return (self.e_width == other.e_width and
                self.m_width == other.m_width)

    def __hash__(self):
        return hash((self.e_width, self.m_width))

    @staticmethod
    def standard(width):
        """ Get standard IEEE 754-2008 format.

        :param width: bit-width of requested format.
        :returns: the requested ``FPFormat`` instance.
        """
        if width == 16:
            return FPFormat(5, 10)
        if width == 32:
            return FPFormat(8, 23)
        if width == 64:
            return FPFormat(11, 52)
        if width == 128:
            return FPFormat(15, 112)
        if width > 128 and width % 32 == 0:
            if width > 1000000:  # arbitrary upper limit
                raise ValueError("width too big")
            e_width = round(4 * math.log2(width)) - 13
            return FPFormat(e_width, width - 1 - e_width)
        raise ValueError("width must be the bit-width of a valid IEEE"
                         " 754-2008 binary format")

    def __repr__(self):
        """ Get repr. """
        try:
            if self == self.standard(self.width):
                return f"FPFormat.standard({self.width})"
        except ValueError:
            pass
        return f"FPFormat({self.e_width}, {self.m_width})"

    def check(self, x):
        """ raises ValueError if x is not a packed value of this format
        """
        if not isinstance(x, int) or not 0 <= x <= self.value_mask:
            raise ValueError("operand %r does not fit in a %d-bit format"
                             % (x, self.width))
        return x

    def get_sign(self, x):
        """ returns the sign bit of its input number, x
        """
        return x >> (self.e_width + self.m_width)

    def get_exponent(self, x):
        """ returns the (biased) exponent field of its input number, x
        """
        return (x >> self.m_width) & self.exponent_inf_nan

    def get_mantissa(self, x):
        """ returns the mantissa field of its input number, x
        """
        return x & self.mantissa_mask

    def is_zero(self, x):
        return self.get_exponent(x) == 0 and self.get_mantissa(x) == 0

    def is_subnormal(self, x):
        return self.get_exponent(x) == 0 and self.get_mantissa(x) != 0

    def is_inf(self, x):
        return (self.get_exponent(x) == self.exponent_inf_nan and
                self.get_mantissa(x) == 0)

    def is_nan(self, x):
        """ returns true if x is any NaN, quiet or signalling
        """
        return (self.get_exponent(x) == self.exponent_inf_nan and
                self.get_mantissa(x) != 0)

    def classify(self, x):
        """ returns the OperandCategory of x
        """
        e = self.get_exponent(x)
        m = self.get_mantissa(x)
        if e == 0:
            return OperandCategory.SUBNORMAL if m else OperandCategory.ZERO
        if e == self.exponent_inf_nan:
            return OperandCategory.NAN if m else OperandCategory.INFINITY
        return OperandCategory.NORMAL

    def create(self, s, e, m):
        """ packs sign, (biased) exponent field and mantissa field
        """
        assert s in (0, 1), "sign %r" % s
        assert 0 <= e <= self.exponent_inf_nan, "exponent %r" % e
        assert 0 <= m <= self.mantissa_mask, "mantissa %r" % m
        return ((s << (self.e_width + self.m_width)) |
                (e << self.m_width) | m)

    def zero(self, s):
        return self.create(s, 0, 0)

    def inf(self, s):
        return self.create(s, self.exponent_inf_nan, 0)

    def nan(self):
        """ the canonical quiet NaN: +ve, top mantissa bit set only
        """
        return self.create(0, self.exponent_inf_nan, 1 << (self.m_width-1))

    @property
    def width(self):
        """ Get the total number of bits in the FP format. """
        return 1 + self.e_width + self.m_width

    @property
    def value_mask(self):
        return (1 << self.width) - 1

    @property
    def sign_mask(self):
        return 1 << (self.e_width + self.m_width)

    @property
    def mantissa_mask(self):
        """ Get the mask covering the stored mantissa field. """
        return (1 << self.m_width) - 1

    @property
    def exponent_inf_nan(self):
        """ Get the value of the exponent field designating infinity/NaN. """
        return (1 << self.e_width) - 1

    @property
    def exponent_min_normal(self):
        """ Get the minimum value of the exponent field for normal numbers. """
        return 1

    @property
    def exponent_max_normal(self):
        """ Get the maximum value of the exponent field for normal numbers. """
        return self.exponent_inf_nan - 1

    @property
    def exponent_bias(self):
        """ Get the exponent bias. """
        return (1 << (self.e_width - 1)) - 1


class FPNumBase:
    """ Floating-point number, decoded into fields.

    :attribute fmt: the FPFormat
    :attribute s: sign bit
    :attribute e: biased exponent.  after de-normalisation this is the
        *working* exponent (subnormals are moved up to the minimum normal)
    :attribute m: mantissa.  after de-normalisation it includes the
        implicit bit
    :attribute category: OperandCategory (None for intermediate results)
    :attribute v: the original packed value (None for intermediates)
    """

    def __init__(self, fmt, s=0, e=0, m=0, category=None, v=None):
        self.fmt = fmt
        self.s = s
        self.e = e
        self.m = m
        self.category = category
        self.v = v

    @classmethod
    def decode(cls, fmt, v):
        """ decodes packed value v (in format fmt) into its fields
        """
        fmt.check(v)
        return cls(fmt, fmt.get_sign(v), fmt.get_exponent(v),
                   fmt.get_mantissa(v), fmt.classify(v), v)

    def eq(self, i):
        self.fmt = i.fmt
        self.s = i.s
        self.e = i.e
        self.m = i.m
        self.category = i.category
        self.v = i.v
        return self

    def __repr__(self):
        return "FPNumBase(s=%d, e=%d, m=0x%x, %s)" % (self.s, self.e,
                                                      self.m, self.category)

    @property
    def is_zero(self):
        return self.category == OperandCategory.ZERO

    @property
    def is_subnormal(self):
        return self.category == OperandCategory.SUBNORMAL

    @property
    def is_normal(self):
        return self.category == OperandCategory.NORMAL

    @property
    def is_inf(self):
        return self.category == OperandCategory.INFINITY

    @property
    def is_nan(self):
        return self.category == OperandCategory.NAN


class Overflow:
    """ the bits dropped off the bottom of a mantissa: guard, round, sticky.

    :attribute guard: the first bit below the mantissa LSB
    :attribute round_bit: the bit below guard
    :attribute sticky: OR of every bit below round_bit
    :attribute m0: copy of mantissa bit 0 (the "L" bit, for ties-to-even)
    """

    def __init__(self, guard=0, round_bit=0, sticky=0, m0=0):
        self.guard = guard
        self.round_bit = round_bit
        self.sticky = sticky
        self.m0 = m0

    @classmethod
    def from_grs(cls, grs, m0=0):
        """ unpacks a 3-bit guard:round:sticky value """
        return cls((grs >> 2) & 1, (grs >> 1) & 1, grs & 1, m0)

    def __iter__(self):
        yield self.guard
        yield self.round_bit
        yield self.sticky
        yield self.m0

    def __repr__(self):
        return "Overflow(g=%d, r=%d, s=%d, m0=%d)" % tuple(self)

    def eq(self, inp):
        self.guard = inp.guard
        self.round_bit = inp.round_bit
        self.sticky = inp.sticky
        self.m0 = inp.m0
        return self

    @property
    def grs(self):
        return (self.guard << 2) | (self.round_bit << 1) | self.sticky

    @property
    def roundz(self):
        """ round-to-nearest, ties-to-even: round up on more than half,
            or on exactly half when the mantissa LSB is odd
        """
        return self.guard & (self.round_bit | self.sticky | self.m0)

    @property
    def inexact(self):
        return self.guard | self.round_bit | self.sticky


class MultiShiftRMerge:
    """ shifts down (right) and collects the shifted-out bits into
        guard, round and sticky.

        shifts of more than width+2 leave nothing but sticky: every bit
        has gone below the round position.
    """

    def __init__(self, width):
        self.width = width
        self.smax = width + 2

    def shift(self, m, diff):
        """ returns (m >> diff, Overflow) """
        assert diff >= 0, "negative shift %d" % diff
        m = Const.normalize(m, (self.width, False))
        if diff == 0:
            return m, Overflow(m0=m & 1)
        if diff > self.smax:
            return 0, Overflow(sticky=int(m != 0))

        lost = m & ((1 << diff) - 1)
        guard = (lost >> (diff-1)) & 1
        round_bit = 0
        sticky = 0
        if diff >= 2:
            round_bit = (lost >> (diff-2)) & 1
        if diff >= 3:
            sticky = int((lost & ((1 << (diff-2)) - 1)) != 0)
        m = m >> diff
        return m, Overflow(guard, round_bit, sticky, m & 1)
