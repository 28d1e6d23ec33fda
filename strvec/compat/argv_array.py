"""Compatibility names for the historic argv_array interface

Every name here is a plain alias of the StrVec API with the same
contract. Function forms take the vector as their first argument.
"""

from strvec.core.strvec import EMPTY_STRVEC, StrVec

ArgvArray = StrVec
empty_argv = EMPTY_STRVEC


def STRVEC_INIT() -> StrVec:
    """Return a new, empty vector"""
    return StrVec()


ARGV_ARRAY_INIT = STRVEC_INIT

strvec_init = StrVec.init
strvec_push = StrVec.push
strvec_pushf = StrVec.pushf
strvec_pushl = StrVec.pushl
strvec_pushv = StrVec.pushv
strvec_pop = StrVec.pop
strvec_split = StrVec.split
strvec_clear = StrVec.clear
strvec_detach = StrVec.detach

argv_array_init = strvec_init
argv_array_push = strvec_push
argv_array_pushf = strvec_pushf
argv_array_pushl = strvec_pushl
argv_array_pushv = strvec_pushv
argv_array_pop = strvec_pop
argv_array_split = strvec_split
argv_array_clear = strvec_clear
argv_array_detach = strvec_detach

__all__ = [
    'ArgvArray',
    'empty_argv',
    'STRVEC_INIT',
    'ARGV_ARRAY_INIT',
    'strvec_init',
    'strvec_push',
    'strvec_pushf',
    'strvec_pushl',
    'strvec_pushv',
    'strvec_pop',
    'strvec_split',
    'strvec_clear',
    'strvec_detach',
    'argv_array_init',
    'argv_array_push',
    'argv_array_pushf',
    'argv_array_pushl',
    'argv_array_pushv',
    'argv_array_pop',
    'argv_array_split',
    'argv_array_clear',
    'argv_array_detach',
]
