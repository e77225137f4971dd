class TrackingError(Exception):
    """Base class for failures reported by the tracker client."""


class UnexpectedStatusError(TrackingError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"KISSmetrics error ---> RECEIVED WRONG STATUS CODE [{status_code}]")


class AliasError(TrackingError):
    """One or more requests of an alias fan-out failed.

    ``failures`` pairs each failed alias with its exception, in request order.
    ``succeeded`` lists the aliases the tracker accepted.
    """

    def __init__(
        self,
        person: str,
        failures: list[tuple[str, BaseException]],
        succeeded: list[str],
    ):
        self.person = person
        self.failures = failures
        self.succeeded = succeeded
        failed = ", ".join(alias for alias, _ in failures)
        super().__init__(
            f"KISSmetrics alias failed for {len(failures)} of "
            f"{len(failures) + len(succeeded)} aliases of {person}: {failed}"
        )

    @property
    def first(self) -> BaseException:
        return self.failures[0][1]
