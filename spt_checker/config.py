import os
from decimal import Decimal
from fractions import Fraction

import numpy as np

# Names accepted for --weight-type / SPT_WEIGHT_TYPE
WEIGHT_TYPES = {
    "float": float,
    "int": int,
    "fraction": Fraction,
    "decimal": Decimal,
    "int64": np.int64,
    "int32": np.int32,
    "float32": np.float32,
}


class Config:
    """Checker configuration"""

    # Diagnostic plots
    PLOT_DIR = os.getenv('SPT_PLOT_DIR', 'data/plots')

    # Verification defaults
    DEFAULT_ROOT = int(os.getenv('SPT_DEFAULT_ROOT', '0'))
    WEIGHT_TYPE = os.getenv('SPT_WEIGHT_TYPE', 'float')

    # Logging
    LOG_LEVEL = os.getenv('SPT_LOG_LEVEL', 'WARNING')
