"""IEEE754 Floating Point Adder Pipeline

the adder is three chained pipes:

* special cases (NaN/inf/zero bypass) and de-normalisation
* align, add/subtract (add0) and carry-out correction (add1)
* normalise, round and pack

a special case finishes in the first pipe: its result (oz) goes
straight to pack, skipping everything in between.
"""

from functools import lru_cache

from ieee754add.fpcommon.roundz import FPRoundData
from ieee754add.fpcommon.normtopack import FPNormToPack
from ieee754add.fpcommon.modbase import FPModBase
from ieee754add.fpadd.specialcases import FPAddSpecialCasesDeNorm
from ieee754add.fpadd.addstages import FPAddAlignSingleAdd
from ieee754add.pipeline import PipelineSpec


class FPADDBasePipe(FPModBase):
    def __init__(self, pspec):
        super().__init__(pspec, "fpadd")
        self.pipe1 = FPAddSpecialCasesDeNorm(pspec)
        self.pipe2 = FPAddAlignSingleAdd(pspec)
        self.pipe3 = FPNormToPack(pspec)

    def ispec(self):
        return self.pipe1.ispec()

    def ospec(self):
        return self.pipe3.ospec()

    def bypass(self, i):
        """ hands a special-case result directly to pack
        """
        r = FPRoundData(self.pspec)
        r.out_do_z = True
        r.oz = i.oz
        return self.pipe3.pack.process(r)

    def process(self, i):
        o = self.pipe1.process(i)
        if o.out_do_z:
            return self.bypass(o)
        o = self.pipe2.process(o)
        return self.pipe3.process(o)


@lru_cache(maxsize=None)
def _default_pspec(width):
    return PipelineSpec(width)


def fpadd(a, b, width=32, pspec=None):
    """ adds packed IEEE754 values a and b.

    :param a: first operand, as an unsigned int bit-pattern
    :param b: second operand, as an unsigned int bit-pattern
    :param width: format bit-width (16, 32, 64...), ignored if pspec given
    :param pspec: optional PipelineSpec (format, leading-zero counter)
    :returns FPPackData: ``z, overflow, underflow, inexact``
    """
    dut = FPADDBasePipe(pspec or _default_pspec(width))
    i = dut.ispec()
    i.a = a
    i.b = b
    return dut.process(i)


def fpsub(a, b, width=32, pspec=None):
    """ subtracts b from a: a plus b with its sign bit inverted
    """
    pspec = pspec or _default_pspec(width)
    fmt = pspec.fpformat
    return fpadd(a, fmt.check(b) ^ fmt.sign_mask, pspec=pspec)
