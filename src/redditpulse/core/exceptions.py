"""Exceptions raised by the analysis passes."""


class ContractViolation(ValueError):
    """Raised when a component receives misaligned or malformed input."""
