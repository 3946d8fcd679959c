"""Diagnostic trace providers for error construction and detail attachment.

A trace provider is a zero-argument callable returning a trace string. The
error model asks the active provider for a trace whenever an error is built or
a detail is attached. Capturing a real stack costs time proportional to its
depth, so the provider is replaceable per call, per context, or process-wide.

Traces are internal diagnostics only and never reach the wire envelope.
"""

from __future__ import annotations

import traceback
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from packages.service_errors.config import ServiceErrorsSettings

TraceProvider = Callable[[], str]

# Frames belonging to this module and the error model itself.
_INTERNAL_FRAMES = 3


def stack_trace_provider(*, limit: int | None = None) -> TraceProvider:
    """Return a provider that formats the caller's Python stack.

    ``limit`` caps the number of frames kept, counted from the capture site.
    """

    def capture() -> str:
        frames = traceback.extract_stack()[:-_INTERNAL_FRAMES]
        if limit is not None:
            frames = frames[-limit:]
        return "".join(traceback.format_list(frames))

    return capture


def no_trace() -> str:
    """Provider that never captures anything."""
    return ""


def fixed_trace(text: str) -> TraceProvider:
    """Return a provider that always yields ``text``."""

    def capture() -> str:
        return text

    return capture


_ACTIVE_PROVIDER: ContextVar[TraceProvider] = ContextVar(
    "service_errors_trace_provider", default=stack_trace_provider()
)


def current_trace_provider() -> TraceProvider:
    """Return the provider active in the current context."""
    return _ACTIVE_PROVIDER.get()


def capture_trace(provider: TraceProvider | None = None) -> str:
    """Capture one trace through ``provider`` or the active provider."""
    return (provider or _ACTIVE_PROVIDER.get())()


def install_trace_provider(provider: TraceProvider) -> Token[TraceProvider]:
    """Make ``provider`` active for the current context.

    Returns the ``ContextVar`` token so callers can restore the previous
    provider with ``reset_trace_provider``.
    """
    return _ACTIVE_PROVIDER.set(provider)


def reset_trace_provider(token: Token[TraceProvider]) -> None:
    """Restore the provider that was active before ``install_trace_provider``."""
    _ACTIVE_PROVIDER.reset(token)


@contextmanager
def use_trace_provider(provider: TraceProvider) -> Iterator[None]:
    """Temporarily activate ``provider`` for the duration of a block."""
    token = _ACTIVE_PROVIDER.set(provider)
    try:
        yield
    finally:
        _ACTIVE_PROVIDER.reset(token)


def provider_from_settings(settings: ServiceErrorsSettings) -> TraceProvider:
    """Build the provider described by the ``trace`` settings subtree."""
    if not settings.trace.enabled:
        return no_trace
    return stack_trace_provider(limit=settings.trace.limit)


def configure_tracing(settings: ServiceErrorsSettings) -> Token[TraceProvider]:
    """Install the provider described by ``settings`` for the current context."""
    return install_trace_provider(provider_from_settings(settings))
