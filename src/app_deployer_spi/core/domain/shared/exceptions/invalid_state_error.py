from __future__ import annotations

from app_deployer_spi.core.domain.shared.exceptions.domain_error import DomainError


class InvalidStateError(DomainError):
    """Raised when a value would put the object into a state it must never hold."""
