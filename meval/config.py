from __future__ import annotations
import os

from meval.errors import MevalError
from meval.evaluation.strategies import Strategy


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}

# Defaults
_DEFAULT_STRATEGY = 'strict'
_DEFAULT_CHECK_UNASSIGNED = True


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip().lower()


def flag_from_env(var: str, default: bool) -> bool:
    raw = value_from_env(var, '')
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise MevalError(f"{var} must be a boolean flag, got {raw!r}")


def parse_strategy(name: str) -> Strategy:
    try:
        return Strategy(name.strip().lower())
    except ValueError:
        raise MevalError(f"Unknown evaluation strategy {name!r}") from None


def get_default_strategy() -> Strategy:
    """Strategy selected by MEVAL_STRATEGY (strict, lazy or mixed)."""
    return parse_strategy(value_from_env('MEVAL_STRATEGY', _DEFAULT_STRATEGY))


def get_check_unassigned() -> bool:
    return flag_from_env('MEVAL_CHECK_UNASSIGNED', _DEFAULT_CHECK_UNASSIGNED)
