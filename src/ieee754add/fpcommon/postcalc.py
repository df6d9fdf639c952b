# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.fpbase import Overflow, FPNumBase


class FPPostCalcData:
    """ result of the arithmetic, ready for normalisation

    :attribute z: sign, exponent and mantissa (implicit bit included,
        not yet normalised)
    :attribute of: guard, round and sticky below z.m
    """

    def __init__(self, pspec):
        self.z = FPNumBase(pspec.fpformat)
        self.of = Overflow()
        self.out_do_z = False
        self.oz = 0

    def __iter__(self):
        yield self.z
        yield self.out_do_z
        yield self.oz
        yield from self.of

    def eq(self, i):
        self.z = FPNumBase(i.z.fmt).eq(i.z)
        self.of = Overflow().eq(i.of)
        self.out_do_z = i.out_do_z
        self.oz = i.oz
        return self
