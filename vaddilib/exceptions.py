"""Exceptions raised by the calculator core."""


class VaddiError(ValueError):
    """Base class for calculator errors."""


class InvalidDurationSpec(VaddiError):
    """Duration type or spec object is not one the resolver understands."""


class InvalidCompoundFrequency(VaddiError):
    """Compounding frequency is missing, zero, negative or not a whole month count."""


class InvalidRateType(VaddiError):
    """Rate quotation type is unknown."""


class InvalidInterestType(VaddiError):
    """Interest type is neither simple nor compound."""
