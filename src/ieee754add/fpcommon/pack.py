# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpcommon.roundz import FPRoundData


class FPPackData:
    """ packed result plus exception flags.

    iterates (and so unpacks) as ``z, overflow, underflow, inexact``
    """

    def __init__(self, pspec):
        self.z = 0
        self.overflow = False
        self.underflow = False
        self.inexact = False

    def eq(self, i):
        self.z = i.z
        self.overflow = i.overflow
        self.underflow = i.underflow
        self.inexact = i.inexact
        return self

    def __iter__(self):
        yield self.z
        yield self.overflow
        yield self.underflow
        yield self.inexact

    def ports(self):
        return list(self)

    def __repr__(self):
        return ("FPPackData(z=0x%x, overflow=%s, underflow=%s, inexact=%s)"
                % tuple(self))


class FPPackMod(FPModBase):

    def __init__(self, pspec):
        super().__init__(pspec, "pack")

    def ispec(self):
        return FPRoundData(self.pspec)

    def ospec(self):
        return FPPackData(self.pspec)

    def process(self, i):
        fmt = self.pspec.fpformat
        o = self.ospec()
        if i.out_do_z:
            o.z = i.oz
            return o

        z = i.z
        if z.e >= fmt.exponent_inf_nan:
            o.z = fmt.inf(z.s)
            o.overflow = True
            o.inexact = True
            return o

        # no implicit bit: subnormal (or zero), exponent field is zero
        if z.m >> fmt.m_width:
            e = z.e
        else:
            e = 0
        o.z = fmt.create(z.s, e, z.m & fmt.mantissa_mask)
        o.underflow = i.underflow
        o.inexact = i.inexact
        return o
