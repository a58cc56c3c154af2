from __future__ import annotations

from app_deployer_spi.core.domain.shared.exceptions.domain_error import DomainError


class UnsupportedOperationError(DomainError, NotImplementedError):
    """Raised when a deployer is asked for an operation it does not implement."""
