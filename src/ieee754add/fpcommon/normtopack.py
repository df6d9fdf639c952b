# IEEE Floating Point Adder (software model)

from ieee754add.fpcommon.modbase import FPModBaseChain
from ieee754add.fpcommon.postnormalise import FPNorm1ModSingle
from ieee754add.fpcommon.roundz import FPRoundMod
from ieee754add.fpcommon.pack import FPPackMod


class FPNormToPack(FPModBaseChain):

    def get_chain(self):
        """ Normalisation, Rounding, Pack - in a chain
        """
        nmod = FPNorm1ModSingle(self.pspec)
        rmod = FPRoundMod(self.pspec)
        pmod = FPPackMod(self.pspec)
        return [nmod, rmod, pmod]

    @property
    def pack(self):
        return self.chain[-1]
