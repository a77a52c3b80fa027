"""Streaming adapter shared by all HTTP providers.

``BaseStreamingAdapter`` owns the part of a streaming call that does not vary
by vendor: opening the response, rejecting non-2xx statuses, feeding lines to
the :mod:`line_decoder`, logging, metrics, and mapping failures to
``ProviderError``. Vendors contribute only a ``starter`` (opens the
``httpx`` stream) and a :class:`StreamFormat`.

Failure mapping:
    - failure before the response is open: ``TRANSPORT`` (or the classified
      code), the same kinds a non-streaming call raises;
    - non-2xx status: ``HTTP_ERROR`` with status and reason phrase;
    - transport failure or vendor error line while reading: ``STREAM_ERROR``.
"""
from __future__ import annotations

from contextlib import AbstractContextManager, ExitStack, suppress
from typing import Callable, Iterator

import httpx

from ..errors import ErrorCode, ProviderError, to_provider_error
from ..log_support import LogContext
from ..logging import normalized_log_event
from .line_decoder import StreamFormat, StreamPayloadError, iter_deltas
from .streaming import ChatStreamEvent
from .streaming_metrics import StreamMetrics

StreamStarter = Callable[[], AbstractContextManager[httpx.Response]]


def raise_for_status(resp: httpx.Response, *, provider: str, model: str | None) -> None:
    """Raise ``HTTP_ERROR`` for a non-2xx response."""
    if resp.is_success:
        return
    status_text = resp.reason_phrase or ""
    raise ProviderError(
        code=ErrorCode.HTTP_ERROR,
        message=f"{provider} API error: {resp.status_code} {status_text}".rstrip(),
        provider=provider,
        model=model,
        status=resp.status_code,
        status_text=status_text or None,
    )


class BaseStreamingAdapter:
    """Encapsulates the provider streaming loop."""

    def __init__(
        self,
        *,
        ctx: LogContext,
        provider_name: str,
        model: str,
        starter: StreamStarter,
        stream_format: StreamFormat,
        logger,
    ) -> None:
        self.ctx = ctx
        self.provider_name = provider_name
        self.model = model
        self._starter = starter
        self._format = stream_format
        self._logger = logger
        self.metrics = StreamMetrics()

    def _on_malformed(self, line: str, exc: Exception) -> None:
        self.metrics.skipped_lines += 1
        normalized_log_event(
            self._logger,
            "stream.decode_error",
            self.ctx,
            phase="mid_stream",
            emitted=self.metrics.emitted,
            error=str(exc),
            line=line[:200],
        )

    def _fail(self, err: ProviderError) -> ProviderError:
        self.metrics.finish()
        normalized_log_event(
            self._logger,
            "stream.error",
            self.ctx,
            phase="finalize",
            emitted=self.metrics.emitted,
            error_code=err.code.value,
            error=err.message,
            status=err.status,
            metrics=self.metrics.to_dict(),
        )
        return err

    def run(self) -> Iterator[ChatStreamEvent]:
        """Execute the streaming lifecycle, yielding deltas then one terminal event."""
        normalized_log_event(self._logger, "stream.start", self.ctx, phase="start", format=self._format.name)
        with ExitStack() as stack:
            try:
                resp = stack.enter_context(self._starter())
            except Exception as e:
                raise self._fail(to_provider_error(e, provider=self.provider_name, model=self.model)) from e

            if not resp.is_success:
                with suppress(httpx.HTTPError):
                    resp.read()
                try:
                    raise_for_status(resp, provider=self.provider_name, model=self.model)
                except ProviderError as e:
                    raise self._fail(e) from None

            try:
                for delta in iter_deltas(resp.iter_lines(), self._format, on_malformed=self._on_malformed):
                    self.metrics.record_delta()
                    yield ChatStreamEvent(provider=self.provider_name, model=self.model, delta=delta)
            except StreamPayloadError as e:
                raise self._fail(
                    ProviderError(
                        code=ErrorCode.STREAM_ERROR,
                        message=f"Stream error: {e}",
                        provider=self.provider_name,
                        model=self.model,
                        raw=e,
                    )
                ) from e
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise self._fail(
                    to_provider_error(e, provider=self.provider_name, model=self.model, mid_stream=True)
                ) from e

        self.metrics.finish()
        normalized_log_event(
            self._logger,
            "stream.end",
            self.ctx,
            phase="finalize",
            emitted=self.metrics.emitted,
            metrics=self.metrics.to_dict(),
        )
        yield ChatStreamEvent(provider=self.provider_name, model=self.model, delta=None, finish=True)


__all__ = ["BaseStreamingAdapter", "StreamStarter", "raise_for_status"]
