# topmark:header:start
#
#   project      : JsonScribe
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the JsonScribe test suite.

Provides typed wrappers around pytest decorators and keeps the package logger
in a known state, so tests that configure logging (e.g. through the CLI) do not
leak handlers or levels into later tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from jsonscribe.config.logging import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Iterator

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
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_jsonscribe_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Restore handlers, level and propagation of the ``jsonscribe`` logger after each test."""
    pkg_logger: logging.Logger = logging.getLogger("jsonscribe")
    handlers: list[logging.Handler] = pkg_logger.handlers[:]
    level: int = pkg_logger.level
    propagate: bool = pkg_logger.propagate
    yield
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
