# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Message-channel surface for the preference store.

Registers a PreferenceStore as the sole handler of the UserDefaultsApi
channels and provides a JSON-lines stdio host.

Usage:
    python -m shared_preferences.channel < requests.jsonl

Exports:
    PreferencesApi: Binds store operations to channel handlers
    InProcessMessenger: Direct-call messenger implementation
    ChannelRequest: Input schema from the host framework
    ChannelReply: Reply envelope to the host framework
"""

from .api import (
    CHANNEL_PREFIX,
    BinaryMessenger,
    InProcessMessenger,
    MessageHandler,
    PreferencesApi,
    channel_name,
)
from .schema import ChannelReply, ChannelRequest, decode_value, encode_value

__all__ = [
    "CHANNEL_PREFIX",
    "BinaryMessenger",
    "ChannelReply",
    "ChannelRequest",
    "InProcessMessenger",
    "MessageHandler",
    "PreferencesApi",
    "channel_name",
    "decode_value",
    "encode_value",
]
