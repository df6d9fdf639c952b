""" runs an adder function over lists of operand pairs, checking each
    result against numpy's (IEEE754, round-to-nearest-even) arithmetic.

    NaN results are only checked for being the canonical NaN: numpy
    passes NaN payloads through.
"""

from random import randint

import numpy as np

from ieee754add.fpcommon.fpbase import FPFormat


NPTYPES = {16: (np.float16, np.uint16),
           32: (np.float32, np.uint32),
           64: (np.float64, np.uint64),
           }


def np_result(width, fpop, a, b):
    ftype, itype = NPTYPES[width]
    fa = np.array([a], dtype=itype).view(ftype)
    fb = np.array([b], dtype=itype).view(ftype)
    with np.errstate(all='ignore'):
        res = fpop(fa, fb)
    return int(res.view(itype)[0])


def check_case(fmt, fpfn, fpop, a, b):
    out = fpfn(a, b, fmt.width)
    expected = np_result(fmt.width, fpop, a, b)
    if fmt.is_nan(expected):
        expected = fmt.nan()
    assert out.z == expected, \
        "0x%x %s 0x%x: output z 0x%x not equal to expected 0x%x" % \
        (a, fpop.__name__, b, out.z, expected)
    return out


def create_random(width, n_vals=10):
    mval = (1<<width)-1
    return [(randint(0, mval), randint(0, mval)) for i in range(n_vals)]


def runfp(width, name, fpfn, fpop, vals=None, n_vals=100):
    fmt = FPFormat.standard(width)
    if vals is None:
        vals = create_random(width, n_vals)
    count = 0
    for a, b in vals:
        check_case(fmt, fpfn, fpop, a, b)
        count += 1
    print (name, "checked", count)
    return count


def pipe_cornercases_repeat(name, width, fpfn, fpop, fn, cc, count):
    fmt = FPFormat.standard(width)
    for i, fixed_num in enumerate(cc(fmt)):
        vals = fn(fmt, fixed_num, count)
        runfp(width, "%s_%d" % (name, i), fpfn, fpop, vals=vals)
