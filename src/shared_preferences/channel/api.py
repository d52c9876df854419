# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Binds a PreferenceStore to the UserDefaultsApi message channels.

Each method of the API gets its own channel.  Handlers receive the
decoded argument list and always answer with a reply envelope, except
for unrecoverable backend failures, which propagate to the transport.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from shared_preferences.exceptions import (
    ChannelError,
    KeyOutsideNamespaceError,
    UnsupportedValueKindError,
)

from .schema import ChannelReply, decode_value

if TYPE_CHECKING:
    from shared_preferences.store import PreferenceStore

CHANNEL_PREFIX = "dev.flutter.pigeon.UserDefaultsApi."

MessageHandler = Callable[[list[Any]], Awaitable[list[Any]]]


def channel_name(method: str) -> str:
    return f"{CHANNEL_PREFIX}{method}"


class BinaryMessenger(Protocol):
    """Transport that routes messages on named channels to handlers."""

    def set_message_handler(self, channel: str, handler: MessageHandler | None) -> None: ...


class InProcessMessenger:
    """Messenger that delivers messages by direct coroutine call."""

    def __init__(self) -> None:
        self._handlers: dict[str, MessageHandler] = {}

    def set_message_handler(self, channel: str, handler: MessageHandler | None) -> None:
        if handler is None:
            self._handlers.pop(channel, None)
        else:
            self._handlers[channel] = handler

    def has_handler(self, channel: str) -> bool:
        return channel in self._handlers

    async def send(self, channel: str, args: list[Any]) -> list[Any]:
        """Deliver *args* to the handler bound to *channel*.

        Raises:
            ChannelError: If no handler is bound.
        """
        handler = self._handlers.get(channel)
        if handler is None:
            raise ChannelError(channel, "no handler registered")
        return await handler(args)


class PreferencesApi:
    """Message handlers for ``getAll``, ``setBool``, ``setDouble``,
    ``setValue``, ``remove`` and ``clear``.

    Example:
        messenger = InProcessMessenger()
        PreferencesApi.setup(messenger, PreferenceStore())
        reply = await messenger.send(channel_name("getAll"), [])
    """

    # Method name -> number of positional arguments
    _arity: ClassVar[dict[str, int]] = {
        "getAll": 0,
        "setBool": 2,
        "setDouble": 2,
        "setValue": 2,
        "remove": 1,
        "clear": 0,
    }

    _recoverable: ClassVar[tuple[type[Exception], ...]] = (
        ChannelError,
        KeyOutsideNamespaceError,
        UnsupportedValueKindError,
    )

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    @classmethod
    def methods(cls) -> list[str]:
        return list(cls._arity)

    @classmethod
    def setup(
        cls,
        messenger: BinaryMessenger,
        store: PreferenceStore | None,
    ) -> PreferencesApi | None:
        """Bind handlers for every method, replacing any existing ones.

        Passing ``store=None`` unbinds all of them.
        """
        if store is None:
            for method in cls._arity:
                messenger.set_message_handler(channel_name(method), None)
            return None

        api = cls(store)
        for method in cls._arity:
            messenger.set_message_handler(channel_name(method), api._handler_for(method))
        return api

    def _handler_for(self, method: str) -> MessageHandler:
        async def handle(args: list[Any]) -> list[Any]:
            return await self.dispatch(method, args)

        return handle

    async def dispatch(self, method: str, args: list[Any]) -> list[Any]:
        """Run *method* and wrap its outcome in a reply envelope."""
        try:
            result = await self._call(method, list(args))
        except self._recoverable as e:
            return ChannelReply.failure(e).to_wire()
        return ChannelReply.ok(result).to_wire()

    async def _call(self, method: str, args: list[Any]) -> Any:
        channel = channel_name(method)
        try:
            args = decode_value(args)
        except ValueError as e:
            raise ChannelError(channel, f"malformed argument: {e}") from e
        expected = self._arity.get(method)
        if expected is None:
            raise ChannelError(channel, "unknown method")
        if len(args) != expected:
            raise ChannelError(channel, f"expected {expected} argument(s), got {len(args)}")
        if expected and not isinstance(args[0], str):
            raise ChannelError(channel, "argument 'key' must be a string")

        if method == "getAll":
            return await self._store.get_all()
        if method == "setBool":
            await self._store.set_bool(args[0], args[1])
        elif method == "setDouble":
            await self._store.set_double(args[0], args[1])
        elif method == "setValue":
            await self._store.set_value(args[0], args[1])
        elif method == "remove":
            await self._store.remove(args[0])
        elif method == "clear":
            await self._store.clear()
        return None
