"""
Shared helpers for service result dictionaries
"""
from typing import Any, Dict

from models.exceptions import StorefrontError


def error_result(error: StorefrontError, **extra: Any) -> Dict[str, Any]:
    # Failure payload every service returns for a recoverable error
    result = {
        "success": False,
        "error": str(error),
        "error_type": type(error).__name__
    }
    result.update(extra)
    return result
