from app_deployer_spi.core.application.ports.app_scaler_port import AppScalerPort
from app_deployer_spi.core.domain.scaling import AppScaleRequest
from app_deployer_spi.core.domain.shared.exceptions import (
    DomainError,
    InvalidArgumentError,
    InvalidStateError,
    UnsupportedOperationError,
)

__all__ = [
    "AppScaleRequest",
    "AppScalerPort",
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedOperationError",
]
