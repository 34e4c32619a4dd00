"""Error values for caught.

- is_error/normalize_error: Error capability check and payload normalization
- ThrownValueError: Wrapper for failure payloads that are not exceptions
- Outcome/unwrap*: Success-or-error union and extraction helpers
"""

from .errors import ThrownValueError, is_error, message_of, normalize_error
from .outcome import Outcome, unwrap, unwrap_or, unwrap_or_else

__all__ = [
    # Error capability
    "ThrownValueError", "is_error", "normalize_error", "message_of",
    # Outcome
    "Outcome", "unwrap", "unwrap_or", "unwrap_or_else",
]
