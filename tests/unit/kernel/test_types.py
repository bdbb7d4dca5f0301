"""Unit tests for RemoteData."""

from __future__ import annotations

from qc_export.kernel.types import ErrorDetail, Failure, Loading, NotAsked, RemoteData, Success


class TestVariants:
    def test_not_asked(self) -> None:
        rd = RemoteData.not_asked()
        assert isinstance(rd, NotAsked)
        assert rd.is_not_asked()
        assert not rd.is_success()

    def test_loading(self) -> None:
        rd = RemoteData.loading()
        assert isinstance(rd, Loading)
        assert rd.is_loading()
        assert not rd.is_failure()

    def test_success_payload(self) -> None:
        rd = RemoteData.success([1, 2])
        assert isinstance(rd, Success)
        assert rd.is_success()
        assert rd.payload == [1, 2]

    def test_failure_errors(self) -> None:
        detail = ErrorDetail(title="t", detail="d")
        rd = RemoteData.failure([detail])
        assert isinstance(rd, Failure)
        assert rd.is_failure()
        assert rd.errors == [detail]


class TestEquality:
    def test_equal_variants(self) -> None:
        assert RemoteData.not_asked() == RemoteData.not_asked()
        assert RemoteData.loading() == RemoteData.loading()
        assert RemoteData.success([1]) == RemoteData.success([1])
        assert RemoteData.failure(["e"]) == RemoteData.failure(["e"])

    def test_unequal_variants(self) -> None:
        assert RemoteData.success([1]) != RemoteData.success([2])
        assert RemoteData.loading() != RemoteData.not_asked()


class TestMapAndMatch:
    def test_map_only_touches_success(self) -> None:
        assert RemoteData.success(2).map(lambda x: x * 10) == RemoteData.success(20)
        assert RemoteData.loading().map(lambda x: x * 10) == RemoteData.loading()

    def test_match(self) -> None:
        handlers = dict(
            not_asked=lambda: "n",
            loading=lambda: "l",
            success=lambda p: f"s{p}",
            failure=lambda e: f"f{len(e)}",
        )
        assert RemoteData.not_asked().match(**handlers) == "n"
        assert RemoteData.loading().match(**handlers) == "l"
        assert RemoteData.success(1).match(**handlers) == "s1"
        assert RemoteData.failure(["a", "b"]).match(**handlers) == "f2"
