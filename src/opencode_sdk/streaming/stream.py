# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Typed async iterator over a Server-Sent Events byte stream.

SSEStream pulls raw bytes from the transport, runs them through an
SSEDecoder, and yields one deserialized item per frame, only when the
consumer asks for it.

Behavior per pull:
1. A buffered frame is waiting: frames with empty data (keep-alives) are
   skipped, anything else is parsed as JSON into the requested type.
2. Nothing is buffered: the next chunk is read from the byte stream and fed
   to the decoder, then step 1 runs again. The loop only suspends while
   waiting for bytes, so there is no busy spin and no recursion.
3. The byte stream fails: APIConnectionError is raised.
4. The byte stream ends: the decoder is flushed and a final frame with data
   is yielded; after that the iteration stops.

Per-item errors (a frame that does not parse, a transport failure) are
raised from ``__anext__`` without discarding state. A consumer that catches
the error and pulls again receives the next buffered frame:

    while True:
        try:
            event = await stream.__anext__()
        except SerializationError:
            continue
        except StopAsyncIteration:
            break
"""

from __future__ import annotations

import json
import logging
from collections import deque
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter

from ..exceptions import APIConnectionError, SerializationError
from ..observability.collector import MetricsCollector
from ..observability.constants import STREAM_ERRORS_TOTAL, STREAM_EVENTS_TOTAL
from ..protocols.streaming import ClosableResponseProtocol
from .decoder import ServerSentEvent, SSEDecoder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SSEStream(AsyncIterator[T], Generic[T]):
    """
    Async iterator yielding typed events decoded from an SSE byte stream.

    The stream is lazy, single-consumer and not restartable: replaying the
    feed needs a fresh request. Memory is bounded by the frames extracted
    from the most recent chunk.

    Usage:
        async with await client.event.list() as stream:
            async for event in stream:
                if event.type == "session.idle":
                    break  # __aexit__ releases the connection

    Note:
        Breaking out of ``async for`` without the context manager leaves the
        connection open until aclose() is called.
    """

    __slots__ = (
        "__weakref__",
        "_adapter",
        "_closed",
        "_decoder",
        "_finished",
        "_inner",
        "_metrics",
        "_pending",
        "_response",
    )

    def __init__(
        self,
        inner: AsyncIterator[bytes],
        cast_to: Any = None,
        *,
        response: ClosableResponseProtocol | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        """
        Initialize the stream.

        Args:
            inner: Raw byte chunks, e.g. ``httpx.Response.aiter_bytes()``
            cast_to: Type each frame's JSON is validated into; None yields
                the decoded JSON value unchanged
            response: Owner of the byte stream, closed when the stream is released
            metrics: Collector receiving per-event and per-error counts
        """
        self._inner = inner
        self._adapter: TypeAdapter[Any] | None = (
            TypeAdapter(cast_to) if cast_to is not None else None
        )
        self._response = response
        self._metrics = metrics
        self._decoder = SSEDecoder()
        self._pending: deque[ServerSentEvent] = deque()
        self._finished = False
        self._closed = False

    async def __anext__(self) -> T:
        """
        Produce the next event.

        Raises:
            SerializationError: The next frame's data is not valid for the target type
            APIConnectionError: The underlying byte stream failed
            StopAsyncIteration: The byte stream ended or the stream was closed
        """
        while not self._closed:
            if self._pending:
                frame = self._pending.popleft()
                if not frame.data:
                    logger.debug(f"Skipping SSE frame without data (event={frame.event})")
                    continue
                return self._parse(frame)

            if self._finished:
                await self.aclose()
                break

            try:
                chunk = await self._inner.__anext__()
            except StopAsyncIteration:
                self._finished = True
                final = self._decoder.flush()
                if final is not None and final.data:
                    self._pending.append(final)
                continue
            except (httpx.HTTPError, OSError) as e:
                self._record_error("connection")
                logger.warning(f"SSE byte stream failed: {type(e).__name__}: {e}")
                raise APIConnectionError(str(e) or type(e).__name__) from e

            self._pending.extend(self._decoder.feed(chunk))

        raise StopAsyncIteration

    def _parse(self, frame: ServerSentEvent) -> T:
        try:
            if self._adapter is None:
                item = json.loads(frame.data)
            else:
                item = self._adapter.validate_json(frame.data)
        except ValueError as e:
            # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
            self._record_error("serialization")
            logger.warning(
                f"Failed to decode SSE event (event={frame.event}, id={frame.id}): {e}"
            )
            raise SerializationError(str(e)) from e

        if self._metrics is not None:
            self._metrics.inc_counter(
                STREAM_EVENTS_TOTAL, labels={"event_type": _event_type(item, frame)}
            )
        return item  # type: ignore[no-any-return]

    def _record_error(self, error_type: str) -> None:
        if self._metrics is not None:
            self._metrics.inc_counter(
                STREAM_ERRORS_TOTAL, labels={"error_type": error_type}
            )

    async def aclose(self) -> None:
        """
        Release the stream. Idempotent.

        Buffered frames are dropped and the underlying response is closed,
        which returns its connection to the transport.
        """
        if self._closed:
            return
        self._closed = True
        self._pending.clear()

        aclose_inner = getattr(self._inner, "aclose", None)
        if aclose_inner is not None:
            await aclose_inner()
        if self._response is not None:
            await self._response.aclose()

    def __aiter__(self) -> SSEStream[T]:
        return self

    async def __aenter__(self) -> SSEStream[T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        """Whether aclose() has run."""
        return self._closed

    @property
    def response(self) -> ClosableResponseProtocol | None:
        """The response owning the byte stream, if one was given."""
        return self._response


def _event_type(item: Any, frame: ServerSentEvent) -> str:
    """Label for the events counter: the payload's ``type``, else the SSE event name."""
    event_type = item.get("type") if isinstance(item, dict) else getattr(item, "type", None)
    if isinstance(event_type, str):
        return event_type
    return frame.event or "message"


__all__ = ["SSEStream"]
