import asyncio
from collections.abc import Callable, Sequence

import httpx
import structlog

from kissmetrics.core.errors import AliasError, UnexpectedStatusError
from kissmetrics.models.types import (
    ALIAS_PATH,
    NAME_PARAM,
    PERSON_PARAM,
    RECORD_PATH,
    SET_PATH,
    ClientConfig,
    Properties,
)
from kissmetrics.providers.tracking.query import (
    build_query_params,
    build_url,
    encode_query,
    now_ms,
)

logger = structlog.get_logger()


class KissmetricsTrackingAdapter:
    """Sends tracking calls to a KISSmetrics tracker host as HTTP GET requests.

    Every operation returns ``None`` once the tracker answers with a 200.
    Network failures propagate as the original ``httpx.TransportError``; any
    other status raises ``UnexpectedStatusError``. Nothing is retried.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout)
        self._clock = clock

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def request(self, path: str, properties: Properties) -> None:
        params = build_query_params(properties, self._config.key, self._clock)
        url = build_url(self._config.host, self._config.port, path, encode_query(params))
        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            logger.warning("KISSmetrics request failed", path=path, error=str(e))
            raise
        if response.status_code != 200:
            logger.warning(
                "KISSmetrics returned unexpected status",
                path=path,
                status=response.status_code,
            )
            raise UnexpectedStatusError(response.status_code)

    async def set_properties(self, person: str, properties: Properties) -> None:
        """Set ``properties`` on ``person`` without recording an event."""
        await self.request(SET_PATH, {**properties, PERSON_PARAM: person})

    async def alias(self, person: str, aliases: str | Sequence[str]) -> None:
        """Merge one or more aliases into ``person``.

        One request per alias, all in flight at once. Returns after every
        request has finished; if any failed, raises ``AliasError`` listing
        which aliases failed and which went through.
        """
        names = [aliases] if isinstance(aliases, str) else list(aliases)
        results = await asyncio.gather(
            *(self.request(ALIAS_PATH, {PERSON_PARAM: person, NAME_PARAM: name}) for name in names),
            return_exceptions=True,
        )
        failures = [
            (name, result)
            for name, result in zip(names, results)
            if isinstance(result, BaseException)
        ]
        if not failures:
            return
        succeeded = [
            name for name, result in zip(names, results) if not isinstance(result, BaseException)
        ]
        logger.warning(
            "KISSmetrics alias partially failed",
            person=person,
            failed=[name for name, _ in failures],
            succeeded=succeeded,
        )
        error = AliasError(person, failures, succeeded)
        raise error from error.first

    async def record(
        self, person: str, event: str, properties: Properties | None = None
    ) -> None:
        """Record ``event`` for ``person``, also setting ``properties`` if given."""
        await self.request(
            RECORD_PATH, {**(properties or {}), PERSON_PARAM: person, NAME_PARAM: event}
        )

    # Names used by the other KISSmetrics client libraries
    set = set_properties
    properties = set_properties
    event = record

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "KissmetricsTrackingAdapter":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
