"""C argv adapter

Builds the NULL-terminated ``char *argv[]`` shape expected by C
process-invocation APIs (execv, posix_spawn) from a StrVec or a detached
array, and reads such arrays back.
"""

import ctypes
import os
from typing import Iterable, List, Optional

from strvec.core.strvec import StrLike, own_string


def to_c_argv(source: Iterable[Optional[StrLike]]) -> ctypes.Array:
    """Synthesize a NULL-terminated c_char_p array

    Reading stops at the first None, so a StrVec, its argv view or a
    detached list all produce the same array. Strings are encoded with
    the filesystem encoding.

    Args:
        source: Strings to place in the array

    Returns:
        ctypes array of ``len + 1`` c_char_p slots, the last one NULL
    """
    encoded: List[bytes] = []
    for value in source:
        if value is None:
            break
        encoded.append(os.fsencode(own_string(value)))

    # ctypes keeps a reference to each assigned bytes object
    return (ctypes.c_char_p * (len(encoded) + 1))(*encoded, None)


def from_c_argv(array) -> List[str]:
    """Read a NULL-terminated c_char_p array into a list of strings"""
    result = []
    index = 0
    while array[index] is not None:
        result.append(os.fsdecode(array[index]))
        index += 1
    return result
