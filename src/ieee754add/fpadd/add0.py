"""IEEE754 Floating Point Adder Pipeline

"""

from nmigen.hdl.ast import Const

from ieee754add.fpcommon.fpbase import FPNumBase
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpadd.datastruct import FPAddAlignData, FPAddStage0Data


class FPAddStage0Mod(FPModBase):

    def __init__(self, pspec):
        super().__init__(pspec, "add0")

    def ispec(self):
        return FPAddAlignData(self.pspec)

    def ospec(self):
        return FPAddStage0Data(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()
        o.out_do_z = i.out_do_z
        o.oz = i.oz
        if i.out_do_z:
            return o

        a = i.a
        b = i.b
        totw = fmt.m_width + 5  # carry, implicit, mantissa, guard/round/sticky

        # logic is as follows:
        # * same-sign (both negative or both positive) add mantissas
        # * opposite sign, subtract b (the shifted one) from a.
        #   at equal exponents b can still be the bigger: if the
        #   difference comes out negative, negate it and take b's sign
        op1 = a.m << 3
        op2 = (b.m << 3) | i.of.grs
        s = a.s
        if not i.sub:
            tot = op1 + op2
        else:
            # two's complement: invert and add one
            tot = Const.normalize(op1 + ~op2 + 1, (totw, False))
            if tot >> (totw-1):
                tot = Const.normalize(-tot, (totw, False))
                s = b.s

        o.z = FPNumBase(fmt, s, a.e)  # exponent same
        o.tot = tot
        return o
