"""Cross-cutting domain rules shared by the simulators."""

from finplan.domain.validation import InvalidParameter, validate_parameters

__all__ = ["InvalidParameter", "validate_parameters"]
