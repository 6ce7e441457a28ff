"""Exceptions for lab_orders."""


class LabOrdersError(Exception):
    """Base exception for laboratory order errors."""
    pass


class LabOrdersFetchError(LabOrdersError):
    """Raised by a fetch client when lab orders cannot be retrieved."""
    pass
