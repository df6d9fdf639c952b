from random import randint
from itertools import permutations


def corner_cases(fmt):
    tiny = fmt.create(0, 0, 1)                      # smallest subnormal
    return [fmt.zero(1), fmt.zero(0),
            fmt.inf(1), fmt.inf(0),
            fmt.nan(), fmt.nan() | fmt.sign_mask,
            fmt.create(0, fmt.exponent_inf_nan, 1),  # signalling NaN
            tiny, tiny | fmt.sign_mask,
            fmt.create(0, 0, fmt.mantissa_mask),     # largest subnormal
            fmt.create(0, fmt.exponent_min_normal, 0),
            fmt.create(1, fmt.exponent_max_normal, fmt.mantissa_mask),
            fmt.create(0, fmt.exponent_max_normal, fmt.mantissa_mask),
            fmt.create(0, fmt.exponent_bias, 0),     # 1.0
            fmt.create(1, fmt.exponent_bias, 0),     # -1.0
            ]


def get_corner_cases(fmt):
    #corner cases
    return list(permutations(corner_cases(fmt), 2))


def replicate(fixed_num, maxcount):
    if isinstance(fixed_num, int):
        return [fixed_num for i in range(maxcount)]
    else:
        return fixed_num


def get_rval(width):
    mval = (1<<width)-1
    return randint(0, mval)


def set_exponent(fmt, x, e):
    return (x & ~(fmt.exponent_inf_nan << fmt.m_width)) | (e << fmt.m_width)


def get_rand1(fmt, fixed_num, maxcount):
    stimulus_b = [get_rval(fmt.width) for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)


def get_nan_noncan(fmt, fixed_num, maxcount):
    # non-canonical NaNs.
    stimulus_b = [set_exponent(fmt, get_rval(fmt.width), fmt.exponent_inf_nan)
                  for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)


def get_subnormal(fmt, fixed_num, maxcount):
    # exponent field zero
    stimulus_b = [set_exponent(fmt, get_rval(fmt.width), 0)
                  for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)


def get_nearly_zero(fmt, fixed_num, maxcount):
    # nearly zero
    stimulus_b = [set_exponent(fmt, get_rval(fmt.width),
                               fmt.exponent_min_normal)
                  for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)


def get_nearly_inf(fmt, fixed_num, maxcount):
    # nearly inf
    stimulus_b = [set_exponent(fmt, get_rval(fmt.width),
                               fmt.exponent_max_normal)
                  for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)


def get_cancel(fmt, maxcount):
    # opposite signs, same or adjacent exponent: heavy cancellation
    for i in range(maxcount):
        a = get_rval(fmt.width)
        e = fmt.get_exponent(a)
        if e not in (0, fmt.exponent_inf_nan):
            e = max(0, e - randint(0, 1))
        b = fmt.create(1 - fmt.get_sign(a), e,
                       fmt.get_mantissa(a) ^ randint(0, 0xff))
        yield a, b


def get_corner_rand(fmt, fixed_num, maxcount):
    # random
    stimulus_b = [get_rval(fmt.width) for i in range(maxcount)]
    stimulus_a = replicate(fixed_num, maxcount)
    yield from zip(stimulus_a, stimulus_b)
    yield from zip(stimulus_b, stimulus_a)
