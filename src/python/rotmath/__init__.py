"""
===============================================================================
ROTMATH - Rotation Math Primitives
===============================================================================
Quaternion value type with axis-angle and XYZ Euler conversions, in single
and double precision.

Modules:
    quaternion  -- Quaternion / QuaternionF and their aliases
    vector3     -- Vector3 / Vector3F component storage
    util        -- clamp
    constants   -- angular constants and the gimbal-lock threshold
    config      -- YAML configuration for the command line front end
    main        -- `rotmath` command line entry point
===============================================================================
"""

from rotmath.quaternion import (
    Quat,
    Quat32,
    Quat64,
    Quaternion,
    QuaternionF,
    QuaternionLF,
)
from rotmath.util import clamp
from rotmath.vector3 import Vector3, Vector3F

__version__ = "0.1.0"

__all__ = [
    "Quat",
    "Quat32",
    "Quat64",
    "Quaternion",
    "QuaternionF",
    "QuaternionLF",
    "Vector3",
    "Vector3F",
    "clamp",
]
