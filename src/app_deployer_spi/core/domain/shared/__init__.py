from app_deployer_spi.core.domain.shared.exceptions import (
    DomainError,
    InvalidArgumentError,
    InvalidStateError,
    UnsupportedOperationError,
)

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedOperationError",
]
