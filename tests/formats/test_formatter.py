# topmark:header:start
#
#   project      : ResultKit
#   file         : test_formatter.py
#   file_relpath : tests/formats/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter lifecycle: creation, init/finish hooks, read and write dispatch."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest

from resultkit.errors import (
    FormatNotFoundError,
    FormatterInitError,
    NoSniffResultError,
    UnsupportedOperationError,
)
from resultkit.formats.base import FormatFactory
from resultkit.formats.formatter import Formatter
from resultkit.formats.registry import FormatRegistry
from resultkit.results.model import IteratorRowSource, Literal, ResultSet, Row

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.results.model import VariablesTable
    from resultkit.world import World


class Recorder:
    """Collects hook invocations of the fake format."""

    def __init__(self) -> None:
        self.events: list[str] = []
        self.init_result: bool | None = True
        self.init_raises: bool = False
        self.context_raises: bool = False
        self.rowsource: TrackingRowSource | None = None


class TrackingRowSource(IteratorRowSource):
    def __init__(self, rows: list[Row], *, fail_after: int | None = None) -> None:
        super().__init__(rows)
        self.closed = False
        self._served = 0
        self._fail_after = fail_after

    def read_row(self) -> Row | None:
        if self._fail_after is not None and self._served >= self._fail_after:
            raise RuntimeError("stream broke")
        self._served += 1
        return super().read_row()

    def close(self) -> None:
        self.closed = True
        super().close()


def _registry(rec: Recorder, *, reader: bool = True, writer: bool = True) -> FormatRegistry:
    def make_context() -> dict[str, Any]:
        rec.events.append("context")
        if rec.context_raises:
            raise MemoryError("no room")
        return {"written": 0}

    def init(formatter: Formatter, name: str | None) -> bool | None:
        rec.events.append(f"init:{name}")
        if rec.init_raises:
            raise RuntimeError("init exploded")
        return rec.init_result

    def finish(formatter: Formatter) -> None:
        rec.events.append("finish")

    def write(formatter: Formatter, sink: TextIO, results: ResultSet, base: str | None) -> bool:
        first = results.next_row()
        sink.write("first" if first is not None else "empty")
        formatter.context["written"] += 1
        return True

    def get_rowsource(
        formatter: Formatter,
        world: World,
        variables: VariablesTable,
        source: TextIO,
        base: str | None,
    ) -> TrackingRowSource | None:
        variables.add("x")
        return rec.rowsource

    def register(factory: FormatFactory) -> None:
        factory.names = ["fake"]
        factory.label = "Fake"
        factory.context_factory = make_context
        factory.init = init
        factory.finish = finish
        if writer:
            factory.write = write
        if reader:
            factory.get_rowsource = get_rowsource

    registry = FormatRegistry()
    registry.register(register)
    return registry


def test_create_builds_context_and_runs_init() -> None:
    rec = Recorder()
    fmt = Formatter.create(_registry(rec), name="fake")
    assert rec.events == ["context", "init:fake"]
    assert fmt.context == {"written": 0}
    assert fmt.name == "fake"


def test_create_default_format_passes_no_name() -> None:
    rec = Recorder()
    fmt = Formatter.create(_registry(rec))
    assert fmt.name == "fake"
    assert rec.events[-1] == "init:None"


def test_create_unknown_format() -> None:
    with pytest.raises(FormatNotFoundError):
        Formatter.create(_registry(Recorder()), name="nope")


@pytest.mark.parametrize("mode", ["returns_false", "raises"])
def test_init_failure_runs_finish_and_drops_context(mode: str) -> None:
    rec = Recorder()
    if mode == "raises":
        rec.init_raises = True
    else:
        rec.init_result = False
    with pytest.raises(FormatterInitError):
        Formatter.create(_registry(rec), name="fake")
    assert rec.events == ["context", "init:fake", "finish"]


def test_context_failure_skips_init() -> None:
    rec = Recorder()
    rec.context_raises = True
    with pytest.raises(FormatterInitError):
        Formatter.create(_registry(rec), name="fake")
    assert rec.events == ["context"]


def test_destroy_is_idempotent() -> None:
    rec = Recorder()
    fmt = Formatter.create(_registry(rec), name="fake")
    fmt.destroy()
    fmt.destroy()
    assert rec.events.count("finish") == 1
    assert fmt.context is None


def test_context_manager_destroys() -> None:
    rec = Recorder()
    with Formatter.create(_registry(rec), name="fake"):
        pass
    assert rec.events[-1] == "finish"


def test_write_drains_results(sample_results: ResultSet) -> None:
    sink = io.StringIO()
    with Formatter.create(_registry(Recorder()), name="fake") as fmt:
        assert fmt.write(sink, sample_results)
        assert fmt.context["written"] == 1
    assert sink.getvalue() == "first"
    assert sample_results.finished


def test_write_on_reader_only_format(sample_results: ResultSet) -> None:
    with Formatter.create(_registry(Recorder(), writer=False), name="fake") as fmt:
        with pytest.raises(UnsupportedOperationError):
            fmt.write(io.StringIO(), sample_results)
    assert not sample_results.finished
    assert sample_results.next_row() is not None


def test_read_on_writer_only_format(world: World) -> None:
    with Formatter.create(_registry(Recorder(), reader=False), name="fake") as fmt:
        with pytest.raises(UnsupportedOperationError):
            fmt.read(world, io.StringIO(""), ResultSet())


def test_read_appends_rows_and_closes_source(world: World) -> None:
    rec = Recorder()
    rec.rowsource = TrackingRowSource([Row([Literal("a")]), Row([Literal("b")])])
    results = ResultSet()
    with Formatter.create(_registry(rec), name="fake") as fmt:
        assert fmt.read(world, io.StringIO(""), results)
    assert results.variables.names == ("x",)
    assert [row.offset for row in results.rows] == [0, 1]
    assert rec.rowsource.closed


def test_read_closes_source_on_error(world: World) -> None:
    rec = Recorder()
    rec.rowsource = TrackingRowSource([Row([Literal("a")]), Row([Literal("b")])], fail_after=1)
    results = ResultSet()
    with Formatter.create(_registry(rec), name="fake") as fmt:
        with pytest.raises(RuntimeError):
            fmt.read(world, io.StringIO(""), results)
    assert rec.rowsource.closed
    assert len(results) == 1


def test_read_without_rowsource_reports_failure(world: World) -> None:
    with Formatter.create(_registry(Recorder()), name="fake") as fmt:
        assert not fmt.read(world, io.StringIO(""), ResultSet())


def test_create_for_content_without_guess(world: World) -> None:
    with pytest.raises(NoSniffResultError):
        Formatter.create_for_content(world.require_formats(), buffer=b"", identifier="x.bin")


def test_create_for_content_by_suffix(world: World) -> None:
    with Formatter.create_for_content(world.require_formats(), identifier="data.srj") as fmt:
        assert fmt.name == "json"
