"""Tests for transport interfaces and the async wrapper."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from mailkit.mail import AsyncMailTransport, AsyncTransportWrapper, MailTransport, Message


class DummySyncTransport(MailTransport):
    """Sync transport for testing."""

    def __init__(self) -> None:
        """Initialize with call tracking."""
        self.messages_sent: list[Message] = []

    def send(self, message: Message) -> None:
        """Record the sent message."""
        self.messages_sent.append(message)


class FailingSyncTransport(MailTransport):
    """Sync transport that always fails."""

    def send(self, message: Message) -> None:
        """Raise an error."""
        raise RuntimeError("Transport failure")


class TestAbstractTransports:
    """Tests for the abstract base classes."""

    def test_sync_is_abstract(self) -> None:
        """MailTransport cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            MailTransport()  # type: ignore[abstract]

    def test_async_is_abstract(self) -> None:
        """AsyncMailTransport cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            AsyncMailTransport()  # type: ignore[abstract]

    def test_subclass_must_implement_send(self) -> None:
        """Subclass without send implementation raises TypeError."""

        class IncompleteTransport(AsyncMailTransport):
            pass

        with pytest.raises(TypeError, match="abstract"):
            IncompleteTransport()  # type: ignore[abstract]


class TestAsyncTransportWrapper:
    """Tests for AsyncTransportWrapper."""

    def test_wraps_sync_transport(self) -> None:
        """Wrapper exposes the sync transport."""
        sync = DummySyncTransport()
        wrapper = AsyncTransportWrapper(sync)
        assert wrapper.transport is sync
        assert isinstance(wrapper, AsyncMailTransport)

    @pytest.mark.asyncio
    async def test_send_delegates_to_sync_transport(self) -> None:
        """Async send calls the underlying sync transport."""
        sync = DummySyncTransport()
        message = Message(subject="Test", sender="sender@example.com", to=("recipient@example.com",))

        await AsyncTransportWrapper(sync).send(message)

        assert sync.messages_sent == [message]

    @pytest.mark.asyncio
    async def test_send_uses_custom_executor(self) -> None:
        """A custom executor runs the blocking send."""
        sync = DummySyncTransport()
        with ThreadPoolExecutor(max_workers=1) as executor:
            wrapper = AsyncTransportWrapper(sync, executor=executor)
            for i in range(3):
                await wrapper.send(Message(subject=f"Test {i}"))

        assert [m.subject for m in sync.messages_sent] == ["Test 0", "Test 1", "Test 2"]

    @pytest.mark.asyncio
    async def test_send_propagates_exceptions(self) -> None:
        """Exceptions from the sync transport are propagated."""
        wrapper = AsyncTransportWrapper(FailingSyncTransport())

        with pytest.raises(RuntimeError, match="Transport failure"):
            await wrapper.send(Message())
