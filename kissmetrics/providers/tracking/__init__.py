from kissmetrics.core.config import settings
from kissmetrics.models.types import ClientConfig
from kissmetrics.providers.tracking.interface import TrackingProvider


def get_tracking_provider() -> TrackingProvider:
    match settings.tracking_provider:
        case "kissmetrics":
            from kissmetrics.providers.tracking.kissmetrics_adapter import (
                KissmetricsTrackingAdapter,
            )

            return KissmetricsTrackingAdapter(
                ClientConfig(
                    key=settings.kissmetrics_api_key,
                    host=settings.kissmetrics_host,
                    port=settings.kissmetrics_port,
                    timeout=settings.kissmetrics_timeout,
                )
            )
        case _:
            raise ValueError(f"Unknown tracking provider: {settings.tracking_provider}")
