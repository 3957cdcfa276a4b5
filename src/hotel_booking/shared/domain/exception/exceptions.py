class DomainException(Exception):
    """Base exception raised from the domain layer"""

    pass


class ResourceNotFoundException(DomainException):
    """A referenced resource does not exist"""

    pass


class BusinessRuleViolationException(DomainException):
    """A business rule was broken"""

    pass


class PersistenceException(DomainException):
    """The storage layer failed (errors, throttling, timeouts)

    Kept apart from ResourceNotFoundException: a transient storage failure
    and an invalid reference need different messages for the user.
    """

    pass
