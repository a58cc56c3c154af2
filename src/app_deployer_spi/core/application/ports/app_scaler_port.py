from __future__ import annotations

from abc import ABC, abstractmethod

from app_deployer_spi.core.domain.scaling import AppScaleRequest
from app_deployer_spi.core.domain.shared.exceptions import UnsupportedOperationError
from app_deployer_spi.infrastructure.observability.logger_factory_service import get_logger


class AppScalerPort(ABC):
    """Scaling capability of an app deployer.

    Deployers that cannot scale keep the default ``scale``, which refuses the request.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    def supports_scaling(self) -> bool:
        return type(self).scale is not AppScalerPort.scale

    async def scale(self, request: AppScaleRequest) -> None:
        """Scale the deployment to ``request.desired_instance_count`` instances."""
        get_logger(__name__).warning(
            "scale_not_supported",
            deployer=self.name,
            deployment_id=request.deployment_id,
            desired_instance_count=request.desired_instance_count,
        )
        raise UnsupportedOperationError(f"Deployer '{self.name}' does not support scaling")
