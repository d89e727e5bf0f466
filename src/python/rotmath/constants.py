"""
===============================================================================
ROTMATH - Numeric Constants
===============================================================================
Central repository for the angular constants and numeric tolerances shared by
the rotation primitives. All angles are in radians.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# EULER DECOMPOSITION
# =============================================================================
# |m13| at or above this value is treated as gimbal lock (pitch ~ +/-90 deg).
# Always compared in double precision, whatever the quaternion scalar type.
GIMBAL_LOCK_THRESHOLD = 0.9999999

# =============================================================================
# COMPARISON TOLERANCES
# =============================================================================
DEFAULT_ATOL = 1e-9
