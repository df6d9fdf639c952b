# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.fpbase import FPNumBase
from ieee754add.fpcommon.modbase import FPModBase, FPModBaseChain
from ieee754add.fpcommon.basedata import FPBaseData
from ieee754add.fpcommon.pscdata import FPSCData
from ieee754add.fpcommon.denorm import FPAddDeNormMod


class FPAddSpecialCasesMod(FPModBase):
    """ special cases: NaNs, infs, zeros
        NOTE: some of these are unique to add.  see "Special Operations"
        https://steve.hollasch.net/cgindex/coding/ieeefloat.html
    """

    def __init__(self, pspec):
        super().__init__(pspec, "specialcases")

    def ispec(self):
        return FPBaseData(self.pspec)

    def ospec(self):
        return FPSCData(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()

        # decode (raises ValueError on operands that do not fit)
        o.a = a1 = FPNumBase.decode(fmt, i.a)
        o.b = b1 = FPNumBase.decode(fmt, i.b)

        s_nomatch = a1.s != b1.s

        # this is the logic-decision-making for special-cases:
        # if a is NaN or b is NaN return NaN
        # elif a is inf and b is inf and signs don't match return NaN
        # elif a is inf return inf(a)
        # elif b is inf return inf(b)
        # elif a is zero and b zero return signed-a/b
        # elif a is zero return b
        # elif b is zero return a
        if a1.is_nan or b1.is_nan:
            oz = fmt.nan()
        elif a1.is_inf and b1.is_inf and s_nomatch:
            oz = fmt.nan()
        elif a1.is_inf:
            oz = fmt.inf(a1.s)
        elif b1.is_inf:
            oz = fmt.inf(b1.s)
        elif a1.is_zero and b1.is_zero:
            oz = fmt.zero(a1.s & b1.s)
        elif a1.is_zero:
            oz = b1.v
        elif b1.is_zero:
            oz = a1.v
        else:
            return o

        # any special-cases it's a "special".
        o.oz = oz
        o.out_do_z = True
        return o


class FPAddSpecialCasesDeNorm(FPModBaseChain):
    """ special cases chain
    """

    def get_chain(self):
        """ links module to inputs and outputs
        """
        smod = FPAddSpecialCasesMod(self.pspec)
        dmod = FPAddDeNormMod(self.pspec)

        return [smod, dmod]
