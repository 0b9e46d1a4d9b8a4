"""Input-layer public API for key decoding and resolution.

Exports are split between low-level terminal decoding (``read_key``), the
configuration key grammar, and the repeat-aware key resolver.
"""

from .key_spec import NAMED_KEYS, KeySpecError, is_digit_key, parse_key_expression
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .resolver import MAX_REPEAT_COUNT, KeyBinding, KeyResolver

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "NAMED_KEYS",
    "KeySpecError",
    "is_digit_key",
    "parse_key_expression",
    "MAX_REPEAT_COUNT",
    "KeyBinding",
    "KeyResolver",
]
