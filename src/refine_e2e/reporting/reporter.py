"""
Allure Reporting Wrapper
------------------------

This module wraps the Allure Python API so every command run through
a :class:`~refine_e2e.session.RefineSession` shows up as a step of the
test report, the way a browser-automation framework lists its commands
in its own log.  It also attaches evidence (page screenshots, raw text)
when a test fails.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence

import allure

from ..utils.logger import get_logger

_MAX_ARG_LENGTH = 60


def _short(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_ARG_LENGTH:
        text = text[: _MAX_ARG_LENGTH - 3] + "..."
    return text


def describe_call(name: str, args: Sequence[Any] = (), kwargs: Mapping[str, Any] | None = None) -> str:
    """Render ``name(arg, key=value)`` with long arguments shortened."""
    parts = [_short(arg) for arg in args]
    parts.extend(f"{key}={_short(value)}" for key, value in (kwargs or {}).items())
    return f"{name}({', '.join(parts)})"


class Reporter:
    """Wrapper around Allure for command steps and failure evidence."""

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__name__)

    @contextmanager
    def step(self, name: str, args: Sequence[Any] = (), kwargs: Mapping[str, Any] | None = None) -> Iterator[None]:
        """Run the body as one Allure step titled after the command call."""
        title = describe_call(name, args, kwargs)
        self.logger.debug("-> %s", title)
        with allure.step(title):
            yield

    def attach_text(self, text: str, name: str = "attachment") -> None:
        allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)

    def attach_screenshot(self, data: bytes, name: str = "screenshot") -> None:
        allure.attach(data, name=name, attachment_type=allure.attachment_type.PNG)


__all__ = ["Reporter", "describe_call"]
