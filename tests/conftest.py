import pytest

from app_deployer_spi.core.domain.scaling import AppScaleRequest


@pytest.fixture
def scale_request() -> AppScaleRequest:
    return AppScaleRequest("app-1", 3)
