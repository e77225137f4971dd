from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TRACKER_HOST: Final = "trk.kissmetrics.com"
DEFAULT_TRACKER_PORT: Final = 80
DEFAULT_TIMEOUT: Final = 10.0

# Reserved query parameters understood by the tracker
PERSON_PARAM: Final = "_p"
NAME_PARAM: Final = "_n"
KEY_PARAM: Final = "_k"
TIMESTAMP_PARAM: Final = "_t"
DATE_OVERRIDE_PARAM: Final = "_d"

SET_PATH: Final = "/s"
ALIAS_PATH: Final = "/a"
RECORD_PATH: Final = "/e"

PropertyValue = str | int | float | bool
Properties = Mapping[str, PropertyValue]


class ClientConfig(BaseModel):
    """Connection settings for a tracking client. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    host: str = DEFAULT_TRACKER_HOST
    port: int = Field(default=DEFAULT_TRACKER_PORT, gt=0, lt=65536)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
