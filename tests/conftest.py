# topmark:header:start
#
#   project      : ResultKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ResultKit test suite.

Sets up typed wrappers around pytest decorators, verbose logging for test runs
and a few shared fixtures (an opened `World`, a small bindings result).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from resultkit.config import logging
from resultkit.config.model import Config
from resultkit.constants import XSD_NAMESPACE_URI
from resultkit.results.model import BlankNode, Literal, ResultSet, Row, Uri
from resultkit.world import World

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_resultkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so detailed output is captured on failures."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def world() -> Iterator[World]:
    """An opened world with the built-in formats only (no entry points)."""
    with World(Config(load_plugins=False)) as w:
        yield w


@fixture()
def sample_results() -> ResultSet:
    """Two rows over ``?s ?o``; the second leaves ``?o`` unbound."""
    results = ResultSet(["s", "o"])
    results.add_row(
        Row(
            [
                Uri("http://example.org/a"),
                Literal("42", XSD_NAMESPACE_URI + "integer"),
            ]
        )
    )
    results.add_row(Row([BlankNode("b0"), None]))
    return results
