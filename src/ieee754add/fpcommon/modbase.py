class FPModBase:
    """FPModBase: common code between nearly every pipeline module

    a module allocates its records with ispec()/ospec() and computes a
    fresh output record from an input record in process().  inputs are
    never modified.
    """
    def __init__(self, pspec, modname):
        self.modname = modname
        self.pspec = pspec

    def ispec(self):
        raise NotImplementedError

    def ospec(self):
        raise NotImplementedError

    def process(self, i):
        raise NotImplementedError

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.modname)


class FPModBaseChain(FPModBase):
    """FPModBaseChain: common code between stage-chained pipes

    Links a set of modules (get_chain) together, the output of each
    one being the input of the next.  Also conforms to the stage API
    """
    def __init__(self, pspec, modname=None):
        super().__init__(pspec, modname or self.__class__.__name__)
        self.chain = self.get_chain()

    def get_chain(self):
        raise NotImplementedError

    def ispec(self):
        """ returns the input spec of the first module in the chain
        """
        return self.chain[0].ispec()

    def ospec(self):
        """ returns the output spec of the last module in the chain
        """
        return self.chain[-1].ospec()

    def process(self, i):
        for mod in self.chain:
            i = mod.process(i)
        return i
