from __future__ import annotations


class ValidationError(ValueError):
    """Raised when operator input or settings fail validation."""
