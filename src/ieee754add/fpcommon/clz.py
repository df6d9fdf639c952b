""" count leading zeros

the count is built the same way as a gate-level CLZ: the input is cut
into bit-pairs, each pair yields a 0..2 count, then neighbouring counts
are merged up a tree.  a merged count adds the lower half only when the
upper half was entirely zero.
"""

from nmigen.hdl.ast import Const


class CLZ:
    def __init__(self, width):
        self.width = width

    def generate_pairs(self, sig_in):
        """ returns a list of (count, max_count), LSB pair first
        """
        pairs = []
        for i in range(0, self.width, 2):
            if i+1 >= self.width:
                # odd width: the top bit stands alone
                bit = (sig_in >> i) & 1
                pairs.append((1 - bit, 1))
            else:
                pair = (sig_in >> i) & 0b11
                if pair == 0:
                    pair_cnt = 2
                elif pair == 1:
                    pair_cnt = 1
                else:
                    pair_cnt = 0
                pairs.append((pair_cnt, 2))
        return pairs

    def combine_pairs(self, pairs):
        ret = []
        for i in range(0, len(pairs), 2):
            if i+1 >= len(pairs):
                ret.append(pairs[i])
                continue
            right, rv = pairs[i]
            left, lv = pairs[i+1]
            if left == lv:
                ret.append((left + right, lv + rv))
            else:
                ret.append((left, lv + rv))
        return ret

    def count(self, sig_in):
        sig_in = Const.normalize(sig_in, (self.width, False))
        pairs = self.generate_pairs(sig_in)
        while len(pairs) > 1:
            pairs = self.combine_pairs(pairs)
        return pairs[0][0]


def clz(value, width):
    """ number of leading zeros of ``value`` in a ``width``-bit field.

    callers must not pass zero (the result is then ``width``, but nothing
    may depend on that).
    """
    return CLZ(width).count(value)
