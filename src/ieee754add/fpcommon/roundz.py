# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.fpbase import FPNumBase, MultiShiftRMerge
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.postnormalise import FPNorm1Data


class FPRoundData:

    def __init__(self, pspec):
        self.z = FPNumBase(pspec.fpformat)
        self.underflow = False
        self.inexact = False
        # pipeline bypass [data comes from specialcases]
        self.out_do_z = False
        self.oz = 0

    def eq(self, i):
        self.z = FPNumBase(i.z.fmt).eq(i.z)
        self.underflow = i.underflow
        self.inexact = i.inexact
        self.out_do_z = i.out_do_z
        self.oz = i.oz
        return self


class FPRoundMod(FPModBase):
    """ round to nearest, ties to even.

        a mantissa of all 1s that rounds up ripples to 2.0: it is shifted
        back down and the exponent goes up by one (possibly into
        overflow, which pack deals with).

        an exponent below the minimum normal is brought up to it by
        shifting the *rounded* mantissa down, collecting a fresh
        guard/round/sticky, and rounding a second time.
    """

    def __init__(self, pspec):
        super().__init__(pspec, "roundz")

    def ispec(self):
        return FPNorm1Data(self.pspec)

    def ospec(self):
        return FPRoundData(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()
        o.out_do_z = i.out_do_z
        o.oz = i.oz
        if i.out_do_z:
            return o
        if i.is_zero:
            o.z = FPNumBase(fmt).eq(i.z)
            return o

        mwid = fmt.m_width + 1
        s, e, m = i.z.s, i.z.e, i.z.m
        o.inexact = bool(i.of.inexact)

        m += i.of.roundz
        if m >> mwid:
            m >>= 1
            e += 1
        # rounding may carry a subnormal up into the implicit bit
        o.underflow = i.tiny and not (m >> fmt.m_width)

        if e < fmt.exponent_min_normal:
            msr = MultiShiftRMerge(mwid)
            m, of = msr.shift(m, fmt.exponent_min_normal - e)
            m += of.roundz
            e = fmt.exponent_min_normal
            o.underflow = True
            o.inexact = True

        o.z = FPNumBase(fmt, s, e, m)
        return o
