import httpx

from kissmetrics.core.errors import AliasError, TrackingError, UnexpectedStatusError


class TestUnexpectedStatusError:
    def test_message_includes_status_code(self):
        error = UnexpectedStatusError(503)
        assert error.status_code == 503
        assert "503" in str(error)
        assert isinstance(error, TrackingError)


class TestAliasError:
    def test_reports_failed_and_succeeded_aliases(self):
        refused = httpx.ConnectError("Connection refused")
        error = AliasError(
            "bob",
            [("b", refused), ("c", UnexpectedStatusError(500))],
            ["a"],
        )

        assert error.first is refused
        assert error.succeeded == ["a"]
        assert [alias for alias, _ in error.failures] == ["b", "c"]
        assert "2 of 3" in str(error)
        assert "b, c" in str(error)
