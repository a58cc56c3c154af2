from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from app_deployer_spi.core.domain.shared.exceptions import InvalidArgumentError, InvalidStateError


@dataclass(frozen=True, slots=True)
class AppScaleRequest:
    """Request to scale a deployed app to a desired number of instances.

    - deployment_id: unique deployment ID of the app, returned exactly as supplied.
    - desired_instance_count: target replica count; zero scales the app down to nothing.
    - properties: optional deployer-specific parameters applied during the scale
      operation (e.g. resource overrides). ``None`` means none were supplied, which
      is distinct from an empty mapping. The mapping is shallow-copied at construction
      and exposed read-only; nested values are shared with the caller.

    Copying and pickling rebuild the request from a plain dict of its properties.
    ``dataclasses.asdict`` is not supported for requests that carry properties.
    """

    deployment_id: str
    desired_instance_count: int
    properties: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.deployment_id, str) or not self.deployment_id.strip():
            raise InvalidArgumentError("'deployment_id' must not be empty or None")

        count = self.desired_instance_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgumentError(
                f"'desired_instance_count' must be an int, got {type(count).__name__}"
            )
        if count < 0:
            raise InvalidStateError("'desired_instance_count' must be >= 0")

        if self.properties is not None:
            if not isinstance(self.properties, Mapping):
                raise InvalidArgumentError(
                    f"'properties' must be a mapping or None, got {type(self.properties).__name__}"
                )
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __reduce__(self) -> tuple[Any, ...]:
        properties = None if self.properties is None else dict(self.properties)
        return (type(self), (self.deployment_id, self.desired_instance_count, properties))

    @property
    def has_properties(self) -> bool:
        return self.properties is not None
