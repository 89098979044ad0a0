from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Largest integer magnitude an IEEE double holds without rounding
MAX_EXACT_INT = 2 ** 53

INT_POLICY_STRICT = 'strict'
INT_POLICY_LOSSY = 'lossy'

_INT_POLICIES = (INT_POLICY_STRICT, INT_POLICY_LOSSY)
_DEFAULT_INT_POLICY = INT_POLICY_STRICT


def str_from_env(var: str, default: str, choices: tuple[str, ...]) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("ignoring %s=%r, expected one of %s", var, raw, ", ".join(choices))
        return default
    return value


def get_int_policy() -> str:
    """How integers beyond MAX_EXACT_INT are widened: 'strict' raises, 'lossy' rounds."""
    return str_from_env('ARMA_INT_POLICY', _DEFAULT_INT_POLICY, _INT_POLICIES)
