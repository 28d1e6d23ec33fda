"""StrVec - growable, None-terminated string vectors for building argv lists"""

from strvec.core import (
    EMPTY_STRVEC, StrVec, GrowthPolicy, GrowthLogger, to_c_argv, from_c_argv
)

__version__ = "0.1.0"

__all__ = [
    'EMPTY_STRVEC',
    'StrVec',
    'GrowthPolicy',
    'GrowthLogger',
    'to_c_argv',
    'from_c_argv',
]
