"""IEEE754 Floating Point Adder Pipeline

records passed between the add-specific stages
"""

from ieee754add.fpcommon.fpbase import FPNumBase, Overflow


class FPAddAlignData:
    """ operands lined up on a common exponent

    :attribute a: the operand with the larger exponent (ties: operand a)
    :attribute b: the other operand, mantissa shifted down to a's exponent
    :attribute of: guard, round and sticky shifted out of b
    :attribute sub: signs differ, so the mantissas are subtracted
    """

    def __init__(self, pspec):
        fmt = pspec.fpformat
        self.a = FPNumBase(fmt)
        self.b = FPNumBase(fmt)
        self.of = Overflow()
        self.sub = False
        self.out_do_z = False
        self.oz = 0

    def eq(self, i):
        self.a = FPNumBase(i.a.fmt).eq(i.a)
        self.b = FPNumBase(i.b.fmt).eq(i.b)
        self.of = Overflow().eq(i.of)
        self.sub = i.sub
        self.out_do_z = i.out_do_z
        self.oz = i.oz
        return self


class FPAddStage0Data:
    """ wide sum/difference: tot is carry : mantissa : guard : round : sticky
    """

    def __init__(self, pspec):
        fmt = pspec.fpformat
        self.z = FPNumBase(fmt)
        self.tot = 0  # m_width + 5 bits: 1 carry, implicit, m, 3 extra
        self.out_do_z = False
        self.oz = 0

    def eq(self, i):
        self.z = FPNumBase(i.z.fmt).eq(i.z)
        self.tot = i.tot
        self.out_do_z = i.out_do_z
        self.oz = i.oz
        return self
