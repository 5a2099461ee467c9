from .reconciliation import (
    is_unknown_name,
    reconcile,
    reconstruct_partial,
    validate_candidate,
)

__all__ = [
    "is_unknown_name",
    "reconcile",
    "reconstruct_partial",
    "validate_candidate",
]
