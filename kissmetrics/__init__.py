from kissmetrics.core.errors import AliasError, TrackingError, UnexpectedStatusError
from kissmetrics.models.types import DEFAULT_TRACKER_HOST, DEFAULT_TRACKER_PORT, ClientConfig
from kissmetrics.providers.tracking.kissmetrics_adapter import KissmetricsTrackingAdapter

__all__ = [
    "DEFAULT_TRACKER_HOST",
    "DEFAULT_TRACKER_PORT",
    "AliasError",
    "ClientConfig",
    "KissmetricsTrackingAdapter",
    "TrackingError",
    "UnexpectedStatusError",
]
