from app_deployer_spi.core.domain.shared.exceptions.domain_error import DomainError
from app_deployer_spi.core.domain.shared.exceptions.invalid_argument_error import (
    InvalidArgumentError,
)
from app_deployer_spi.core.domain.shared.exceptions.invalid_state_error import InvalidStateError
from app_deployer_spi.core.domain.shared.exceptions.unsupported_operation_error import (
    UnsupportedOperationError,
)

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedOperationError",
]
