from app_deployer_spi.core.domain.scaling.value_objects.app_scale_request import AppScaleRequest

__all__ = ["AppScaleRequest"]
