import math
from numbers import Integral, Real

from .exceptions import InvalidArgumentError

COMPARISON_TYPES = ("<=", ">=", "<", ">")

def check(cond: bool, msg: str):
    if not cond:
        raise InvalidArgumentError(msg)

def is_integer(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)

def check_probability(p: float):
    check(isinstance(p, Real) and 0 <= p <= 1, "p must be in [0,1]")

def exponentiate(base: float, exponent: int) -> float:
    """Raise ``base`` to an integer power by repeated squaring.

    Negative exponents return the reciprocal. ``exponentiate(x, 0)`` is 1 for
    every ``x``, zero included.
    """
    check(isinstance(base, Real) and not isinstance(base, bool), "base must be a real number")
    check(is_integer(exponent), "exponent must be an integer")
    check(not (base == 0 and exponent < 0), "cannot raise 0 to a negative exponent")
    try:
        b = float(base)
    except OverflowError:
        raise InvalidArgumentError("base is out of floating-point range") from None
    result = 1.0
    e = -exponent if exponent < 0 else exponent
    while e > 0:
        if e & 1:
            result *= b
        b *= b
        e >>= 1
    if exponent < 0:
        if result == 0.0:
            # underflow: reciprocal is +/-inf, as in IEEE division
            return math.copysign(math.inf, result)
        return 1.0 / result
    return result

def geometric_pmf(n: int, p: float) -> float:
    # P(X = n) = p * (1-p)^(n-1), n = trial of the first success
    check(is_integer(n) and n >= 1, "n must be integer >= 1")
    check_probability(p)
    if p == 1:
        return 0.0
    if p == 0:
        return 1.0 if n == 1 else 0.0
    return float(p * exponentiate(1.0 - p, n - 1))

def geometric_cdf(n: int, p: float) -> float:
    # P(X <= n) = 1 - (1-p)^n
    check(is_integer(n) and n >= 0, "n must be integer >= 0")
    check_probability(p)
    if p == 1:
        return 0.0 if n == 0 else 1.0
    if p == 0:
        return 0.0
    return float(1.0 - exponentiate(1.0 - p, n))

def geometric_survival(n: int, p: float) -> float:
    # P(X > n) = (1-p)^n
    check(is_integer(n) and n >= 0, "n must be integer >= 0")
    check_probability(p)
    if p == 1:
        return 1.0 if n == 0 else 0.0
    if p == 0:
        return 1.0
    return float(exponentiate(1.0 - p, n))

def calculate_cumulative_probability(n: int, p: float, comparison: str) -> float:
    """Directional cumulative probability P(X <cmp> n).

    ``comparison`` is one of ``"<="``, ``">="``, ``"<"``, ``">"``. The ``">"``
    branch keeps the historical formula ``cdf(n, p) / p``, which is not the
    closed-form tail; use :func:`geometric_survival` for P(X > n).
    """
    check(is_integer(n) and n >= 1, "n must be integer >= 1")
    check_probability(p)
    if comparison == "<=":
        return geometric_cdf(n, p)
    if comparison == ">=":
        return 1.0 - geometric_cdf(n - 1, p)
    if comparison == "<":
        return geometric_cdf(n - 1, p)
    if comparison == ">":
        if p == 0:
            # 0/0
            return math.nan
        return geometric_cdf(n, p) / p
    raise InvalidArgumentError(f"comparison must be one of {', '.join(COMPARISON_TYPES)}")
