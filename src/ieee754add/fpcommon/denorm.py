# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.fpbase import FPNumBase
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.pscdata import FPSCData


class FPAddDeNormMod(FPModBase):
    """ unpacks both operands for the datapath.

        normal numbers get their implicit bit put back in at the top of
        the mantissa.  subnormals keep a zero top bit and are moved to
        the minimum normal exponent, which is the scale they are
        actually stored at.
    """

    def __init__(self, pspec):
        super().__init__(pspec, "denormalise")

    def ispec(self):
        return FPSCData(self.pspec)

    def ospec(self):
        return FPSCData(self.pspec)

    def denormalise(self, x):
        fmt = self.pspec.fpformat
        if x.is_subnormal:
            e = fmt.exponent_min_normal
            m = x.m
        else:
            e = x.e
            m = x.m | (1 << fmt.m_width)
        return FPNumBase(fmt, x.s, e, m, x.category, x.v)

    def process(self, i):
        o = self.ospec().eq(i)
        if i.out_do_z:
            return o
        o.a = self.denormalise(i.a)
        o.b = self.denormalise(i.b)
        return o
