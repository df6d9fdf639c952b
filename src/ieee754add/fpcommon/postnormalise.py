# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.fpbase import Overflow, FPNumBase
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.postcalc import FPPostCalcData


class FPNorm1Data:
    """ normalised result

    :attribute is_zero: the arithmetic result was exactly zero
    :attribute tiny: normalisation was stopped at the minimum exponent,
        leaving the top mantissa bit clear (a subnormal result)
    """

    def __init__(self, pspec):
        self.z = FPNumBase(pspec.fpformat)
        self.of = Overflow()
        self.is_zero = False
        self.tiny = False
        self.out_do_z = False
        self.oz = 0

    def eq(self, i):
        self.z = FPNumBase(i.z.fmt).eq(i.z)
        self.of = Overflow().eq(i.of)
        self.is_zero = i.is_zero
        self.tiny = i.tiny
        self.out_do_z = i.out_do_z
        self.oz = i.oz
        return self


class FPNorm1ModSingle(FPModBase):
    """ makes the top mantissa bit hi, by shifting up (and decreasing the
        exponent) by the leading-zero count of m:guard:round:sticky.

        the count is limited by the exponent: shifting never takes the
        exponent below the minimum normal.  a result that runs out of
        exponent keeps its leading zeros and is marked tiny.

        results whose carry-out was already shifted down (add1), or whose
        top bit is already set, pass through untouched.
    """

    def __init__(self, pspec):
        super().__init__(pspec, "normalise_1")

    def ispec(self):
        return FPPostCalcData(self.pspec)

    def ospec(self):
        return FPNorm1Data(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()
        o.out_do_z = i.out_do_z
        o.oz = i.oz
        if i.out_do_z:
            return o

        mwid = fmt.m_width + 1
        width = mwid + 3  # mantissa plus guard, round, sticky

        # concatenate s/r/g with mantissa
        temp_m = (i.z.m << 3) | i.of.grs
        assert temp_m >> width == 0, "unnormalisable 0x%x" % temp_m
        e = i.z.e

        if temp_m == 0:
            # exact cancellation: +ve zero, whatever the operand signs
            o.is_zero = True
            o.z = FPNumBase(fmt, 0, 0, 0)
            return o

        if not temp_m >> (width-1):
            clz = self.pspec.clz(temp_m, width)
            assert 0 < clz < width, "clz %d out of range" % clz
            # make sure that the amount to decrease by does NOT
            # go below the minimum non-INF/NaN exponent
            limclz = e - fmt.exponent_min_normal
            if clz > limclz:
                clz = limclz
                o.tiny = True
            temp_m <<= clz
            e -= clz

        m = temp_m >> 3
        o.z = FPNumBase(fmt, i.z.s, e, m)
        o.of = Overflow.from_grs(temp_m & 0b111, m0=m & 1)
        return o
