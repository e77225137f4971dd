"""Query string and URL construction for tracker requests."""

import time
from collections.abc import Callable
from urllib.parse import quote

from kissmetrics.models.types import (
    DATE_OVERRIDE_PARAM,
    KEY_PARAM,
    TIMESTAMP_PARAM,
    Properties,
    PropertyValue,
)

# Characters encodeURI leaves alone, besides letters and digits
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"
# Same set minus the characters that delimit query pairs or start a fragment
_COMPONENT_SAFE = ";,/?:@$-_.!~*'()"


def now_ms() -> int:
    return int(time.time() * 1000)


def build_query_params(
    properties: Properties, key: str, clock: Callable[[], int] = now_ms
) -> dict[str, PropertyValue]:
    """Copy ``properties`` and add the API key and timestamp.

    An explicit ``_t`` is always kept. Without one, the current time is used
    unless ``_d`` is set, in which case the tracker stamps the event itself
    and ``_t`` is left out.
    """
    params = dict(properties)
    params[KEY_PARAM] = key
    if TIMESTAMP_PARAM not in params and not params.get(DATE_OVERRIDE_PARAM):
        params[TIMESTAMP_PARAM] = clock()
    return params


def _format_value(value: PropertyValue | None) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query(params: Properties) -> str:
    """Join ``params`` as ``k=v`` pairs, escaping each key and value on its own.

    ``&``, ``=``, ``#`` and ``+`` inside a key or value are percent-encoded so
    a property can never add a parameter or cut the query short.
    """
    return "&".join(
        f"{quote(str(k), safe=_COMPONENT_SAFE)}={quote(_format_value(v), safe=_COMPONENT_SAFE)}"
        for k, v in params.items()
    )


def build_url(host: str, port: int, path: str, query: str) -> str:
    """``query`` must already be encoded by ``encode_query``."""
    return f"http://{host}:{port}{quote(path, safe=_URI_SAFE)}?{query}"
