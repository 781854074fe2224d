import math
from decimal import Decimal
from functools import lru_cache

import numpy as np

'''
Weight domain:
- Any numeric type with +, ordering and == can be used as an edge weight
- Each type has one "infinity" used for unreached vertices
- Native infinity when the type has one (float, numpy floats, Decimal)
- Otherwise the largest representable value (numpy fixed-width integers)
- Unbounded exact types (int, Fraction) have neither, math.inf orders
  correctly against them so it stands in
'''


@lru_cache(maxsize=None)
def infinity(weight_type: type = float):
    if weight_type is Decimal:
        return Decimal("Infinity")
    if isinstance(weight_type, type) and issubclass(weight_type, np.integer):
        return weight_type(np.iinfo(weight_type).max)
    if isinstance(weight_type, type) and issubclass(weight_type, np.floating):
        return weight_type(np.inf)
    return math.inf


def is_finite(value, weight_type: type = float) -> bool:
    # Distance vectors use infinity(weight_type) as the "unreached" marker
    return value != infinity(weight_type)


def zero(weight_type: type = float):
    return weight_type(0)
