"""Core StrVec container

Modules:
- strvec: The StrVec container and string ownership helpers
- growth: Amortized growth policy and its configuration
- growth_logger: Records backing array reallocations
- c_argv: ctypes argv adapter for C process APIs
"""

from strvec.core.strvec import EMPTY_STRVEC, StrVec, own_string, split_whitespace
from strvec.core.growth import DEFAULT_POLICY, GrowthPolicy
from strvec.core.growth_logger import GrowthEventKind, GrowthLogger, GrowthRecord
from strvec.core.c_argv import from_c_argv, to_c_argv

__all__ = [
    'EMPTY_STRVEC',
    'StrVec',
    'own_string',
    'split_whitespace',
    'DEFAULT_POLICY',
    'GrowthPolicy',
    'GrowthEventKind',
    'GrowthLogger',
    'GrowthRecord',
    'from_c_argv',
    'to_c_argv',
]
