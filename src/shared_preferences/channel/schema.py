# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects and value codec for the preference channel.

These Pydantic models define the contract between the host framework
and the preference store.  Replies use the generated-interface envelope:
``[result]`` on success, ``[code, message, details]`` on failure.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from pydantic import BaseModel, Field

BYTES_TAG = "$bytes"


def encode_value(value: Any) -> Any:
    """Make *value* JSON-safe: ``bytes`` become ``{"$bytes": <base64>}``."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {BYTES_TAG: base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, dict):
        return {key: encode_value(item) for key, item in value.items()}
    return value


def decode_value(value: Any) -> Any:
    """Inverse of :func:`encode_value`.

    Raises:
        ValueError: If a ``$bytes`` payload is not valid base64 text.
    """
    if isinstance(value, dict):
        if set(value) == {BYTES_TAG}:
            payload = value[BYTES_TAG]
            if not isinstance(payload, str):
                raise ValueError(f"'{BYTES_TAG}' payload must be a string")
            try:
                return base64.b64decode(payload, validate=True)
            except binascii.Error as e:
                raise ValueError(f"'{BYTES_TAG}' payload is not valid base64: {e}") from e
        return {key: decode_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [decode_value(item) for item in value]
    return value


class ChannelRequest(BaseModel):
    """One message sent by the host framework.

    Attributes:
        channel: Fully-qualified channel name, e.g.
                 ``dev.flutter.pigeon.UserDefaultsApi.setBool``
        args: Positional arguments, encoded with :func:`encode_value`
    """

    channel: str
    args: list[Any] = Field(default_factory=list)


class ChannelReply(BaseModel):
    """Reply to a single channel message.

    Attributes:
        success: Whether the call completed
        result: Encoded return value (on success)
        code: Error class name (on failure)
        message: Error message (on failure)
        details: Extra error details (on failure)
    """

    success: bool
    result: Any = None
    code: str = ""
    message: str = ""
    details: Any = None

    @classmethod
    def ok(cls, result: Any = None) -> ChannelReply:
        return cls(success=True, result=encode_value(result))

    @classmethod
    def failure(cls, error: Exception, code: str | None = None) -> ChannelReply:
        return cls(
            success=False,
            code=code or type(error).__name__,
            message=str(error),
        )

    def to_wire(self) -> list[Any]:
        """Return the list envelope sent back over the channel."""
        if self.success:
            return [self.result]
        return [self.code, self.message, self.details]
