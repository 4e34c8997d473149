"""Pure calculation helpers with no Flask dependency."""

from compounder.core.series import (
    InvalidParametersError,
    compute,
    is_valid,
    to_csv,
    validation_errors,
)

__all__ = [
    "InvalidParametersError",
    "compute",
    "is_valid",
    "to_csv",
    "validation_errors",
]
