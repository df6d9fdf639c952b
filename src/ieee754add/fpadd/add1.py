"""IEEE754 Floating Point Adder Pipeline

"""

from ieee754add.fpcommon.fpbase import Overflow, FPNumBase
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.postcalc import FPPostCalcData
from ieee754add.fpadd.datastruct import FPAddStage0Data


class FPAddStage1Mod(FPModBase):
    """ Second stage of add: preparation for normalisation.
        detects when tot sum is too big (the top bit of tot is a carry)

        if sum is too big (MSB is set), the mantissa needs shifting
        down and the exponent increased by 1.

        we also need to extract the overflow info: sticky "accumulates"
        the bit shifted out of the bottom.
    """

    def __init__(self, pspec):
        super().__init__(pspec, "add1")

    def ispec(self):
        return FPAddStage0Data(self.pspec)

    def ospec(self):
        return FPPostCalcData(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()
        o.out_do_z = i.out_do_z
        o.oz = i.oz
        if i.out_do_z:
            return o

        tot = i.tot
        e = i.z.e
        msb = tot >> (fmt.m_width + 4)  # get mantissa MSB

        # mantissa shifted down, exponent increased - if MSB set
        if msb:
            tot = (tot >> 1) | (tot & 1)
            e += 1

        m = tot >> 3
        o.z = FPNumBase(fmt, i.z.s, e, m)
        o.of = Overflow.from_grs(tot & 0b111, m0=m & 1)
        return o
