from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import PersistenceException as PersistenceException
from .exceptions import ResourceNotFoundException as ResourceNotFoundException
