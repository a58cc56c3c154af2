from __future__ import annotations

from app_deployer_spi.core.domain.shared.exceptions.domain_error import DomainError


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a supplied argument is missing, blank or of the wrong type."""
