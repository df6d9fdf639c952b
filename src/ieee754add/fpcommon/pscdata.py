"""IEEE754 Floating Point Library

special-cases output record
"""

from ieee754add.fpcommon.fpbase import FPNumBase


class FPSCData:

    def __init__(self, pspec):
        fmt = pspec.fpformat
        # NOTE: oz is created by the special-cases module and, along with
        # its "bypass" flag out_do_z, skips every later stage except pack.
        self.a = FPNumBase(fmt)    # operand a
        self.b = FPNumBase(fmt)    # operand b
        self.oz = 0                # "finished" (bypass) result
        self.out_do_z = False      # "bypass" enabled

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.oz
        yield self.out_do_z

    def eq(self, i):
        self.a = FPNumBase(i.a.fmt).eq(i.a)
        self.b = FPNumBase(i.b.fmt).eq(i.b)
        self.oz = i.oz
        self.out_do_z = i.out_do_z
        return self
