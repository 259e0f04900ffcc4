from collections.abc import Iterable
from typing import Any

import psutil

from dev_noindex.status import is_spotlight_process, report_top_processes


class _FakeProc:
    def __init__(self, pid: int, name: str | None, cpu: float | None, mem: float | None = 0.5):
        self.info = {"pid": pid, "name": name, "cpu_percent": cpu, "memory_percent": mem}


class _GoneProc:
    @property
    def info(self) -> dict[str, Any]:
        raise psutil.NoSuchProcess(999)


def _iterator(procs: list[Any]):
    def _iter(attrs: Iterable[str] | None = None) -> Iterable[Any]:
        assert attrs is not None
        assert "name" in attrs
        return iter(procs)

    return _iter


class TestIsSpotlightProcess:
    def test_known_names(self) -> None:
        for name in ("mds", "mds_stores", "mdworker", "mdworker_shared", "corespotlightd"):
            assert is_spotlight_process(name)

    def test_unrelated_names(self) -> None:
        for name in ("python", "mdsx", "Finder", ""):
            assert not is_spotlight_process(name)


class TestReportTopProcesses:
    def test_filters_and_sorts_by_cpu(self) -> None:
        procs = [
            _FakeProc(1, "launchd", 50.0),
            _FakeProc(10, "mds", 2.0),
            _FakeProc(11, "mdworker_shared", 12.5),
            _FakeProc(12, "mds_stores", 7.0),
        ]

        snapshots = report_top_processes(iterator=_iterator(procs))

        assert [s.name for s in snapshots] == ["mdworker_shared", "mds_stores", "mds"]
        assert snapshots[0].pid == 11
        assert snapshots[0].cpu_percent == 12.5

    def test_caps_to_limit(self) -> None:
        procs = [_FakeProc(i, "mdworker", float(i)) for i in range(20)]

        snapshots = report_top_processes(limit=3, iterator=_iterator(procs))

        assert [s.pid for s in snapshots] == [19, 18, 17]

    def test_no_matches_is_empty(self) -> None:
        assert report_top_processes(iterator=_iterator([_FakeProc(1, "bash", 1.0)])) == []

    def test_missing_fields_and_vanished_processes(self) -> None:
        procs = [_GoneProc(), _FakeProc(5, None, 1.0), _FakeProc(6, "mds", None, None)]

        snapshots = report_top_processes(iterator=_iterator(procs))

        assert len(snapshots) == 1
        assert snapshots[0].cpu_percent == 0.0
        assert snapshots[0].memory_percent == 0.0
