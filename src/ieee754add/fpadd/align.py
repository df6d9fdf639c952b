"""IEEE754 Floating Point Library

"""

from ieee754add.fpcommon.fpbase import FPNumBase, MultiShiftRMerge
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.pscdata import FPSCData
from ieee754add.fpadd.datastruct import FPAddAlignData


class FPAddAlignSingleMod(FPModBase):

    def __init__(self, pspec):
        super().__init__(pspec, "align")

    def ispec(self):
        return FPSCData(self.pspec)

    def ospec(self):
        return FPAddAlignData(self.pspec)

    def process(self, i):
        """ Aligns A against B or B against A, depending on which has the
            greater exponent.  This is done in a *single* step using
            variable-width bit-shift.

            the operands are swapped so that "a" out is always the one with
            the greater (or equal) exponent: only "b" ever gets shifted.
            everything shifted out of b is kept as guard, round and sticky.
        """
        fmt = self.pspec.fpformat
        o = self.ospec()
        o.out_do_z = i.out_do_z
        o.oz = i.oz
        if i.out_do_z:
            return o

        ai, bi = i.a, i.b
        if bi.e > ai.e:
            ai, bi = bi, ai
        ediff = ai.e - bi.e

        msr = MultiShiftRMerge(fmt.m_width + 1)
        bm, of = msr.shift(bi.m, ediff)

        o.a = FPNumBase(fmt).eq(ai)
        o.b = FPNumBase(fmt, bi.s, ai.e, bm, bi.category, bi.v)
        o.of = of
        o.sub = ai.s != bi.s
        return o
