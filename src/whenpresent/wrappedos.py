"""Wrap and memoize a variety of os calls"""
import os
from functools import lru_cache


@lru_cache(maxsize=None)
def isfile(trialpath):
    """Cached version of os.path.isfile"""
    return os.path.isfile(trialpath)


def clear_cache():
    """The cached answers go stale once files are created or removed"""
    isfile.cache_clear()
