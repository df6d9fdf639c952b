# IEEE Floating Point Adder (software model)


class FPBaseData:
    """ raw (packed) operands a and b, as they enter the pipeline
    """

    def __init__(self, pspec, a=0, b=0):
        self.pspec = pspec
        self.a = a
        self.b = b

    def eq(self, i):
        self.a = i.a
        self.b = i.b
        return self

    def __iter__(self):
        yield self.a
        yield self.b

    def ports(self):
        return list(self)
