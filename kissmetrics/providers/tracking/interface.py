from collections.abc import Sequence
from typing import Protocol

from kissmetrics.models.types import Properties


class TrackingProvider(Protocol):
    async def set_properties(self, person: str, properties: Properties) -> None: ...

    async def alias(self, person: str, aliases: str | Sequence[str]) -> None: ...

    async def record(
        self, person: str, event: str, properties: Properties | None = None
    ) -> None: ...

    async def close(self) -> None: ...
