"""Transport interfaces for delivering assembled messages.

A transport is the collaborator that turns a :class:`Message` into an actual
delivery. The builder only ever talks to these interfaces.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from mailkit.mail.message import Message


class MailTransport(ABC):
    """Synchronous transport."""

    @abstractmethod
    def send(self, message: Message) -> None:
        """Deliver *message*.

        Raises:
            MailTransportError: If delivery fails.
        """


class AsyncMailTransport(ABC):
    """Asynchronous transport."""

    @abstractmethod
    async def send(self, message: Message) -> None:
        """Deliver *message*.

        Raises:
            MailTransportError: If delivery fails.
        """


class AsyncTransportWrapper(AsyncMailTransport):
    """Run a synchronous transport in an executor.

    Args:
        transport: The transport to wrap.
        executor: Executor for the blocking call, ``None`` for the loop default.

    Examples:
        >>> from mailkit.mail.transports import MockTransport
        >>> wrapper = AsyncTransportWrapper(MockTransport())
        >>> await wrapper.send(message)  # doctest: +SKIP
    """

    def __init__(self, transport: MailTransport, *, executor: Executor | None = None) -> None:
        self._transport = transport
        self._executor = executor

    @property
    def transport(self) -> MailTransport:
        """Return the wrapped transport."""
        return self._transport

    async def send(self, message: Message) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self._executor, self._transport.send, message)


__all__ = ["AsyncMailTransport", "AsyncTransportWrapper", "MailTransport"]
