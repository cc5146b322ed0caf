"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidWindowError(DomainException, ValueError):
    """Reporting window is not a positive number of months"""

    pass


class InvalidRecordError(DomainException):
    """Record fields do not match the stored entity"""

    pass
