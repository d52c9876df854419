# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the preference channel host.

Usage:
    python -m shared_preferences.channel < requests.jsonl > replies.jsonl

Each stdin line is a ``ChannelRequest`` JSON object; each reply is written
as one JSON list (the reply envelope) on stdout.  Configuration comes from
``SHARED_PREFERENCES_*`` environment variables.

Exit codes:
    0: Input exhausted
    1: Configuration error (details in a JSON reply)
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from pydantic import ValidationError

from shared_preferences._internal.log import configure_logging
from shared_preferences.config import PreferencesSettings, create_backend
from shared_preferences.exceptions import ChannelError, ConfigError
from shared_preferences.store import PreferenceStore

from .api import InProcessMessenger, PreferencesApi
from .schema import ChannelReply, ChannelRequest

logger = logging.getLogger(__name__)


async def serve(messenger: InProcessMessenger, lines: Iterable[str], out: TextIO) -> int:
    """Dispatch every request line and write its reply.  Returns the request count."""
    count = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue
        count += 1
        try:
            request = ChannelRequest.model_validate_json(line)
        except ValidationError as e:
            logger.warning("Rejecting malformed request: %s", e.errors()[0]["msg"])
            reply = ChannelReply.failure(e, code="InvalidRequest").to_wire()
        else:
            try:
                reply = await messenger.send(request.channel, request.args)
            except ChannelError as e:
                logger.warning("Undeliverable message", extra={"channel": request.channel})
                reply = ChannelReply.failure(e).to_wire()
        out.write(json.dumps(reply) + "\n")
        out.flush()
    return count


async def run(settings: PreferencesSettings, lines: Iterable[str], out: TextIO) -> int:
    backend = create_backend(settings)
    try:
        messenger = InProcessMessenger()
        PreferencesApi.setup(messenger, PreferenceStore(backend, prefix=settings.prefix))
        return await serve(messenger, lines, out)
    finally:
        await backend.close()


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        settings = PreferencesSettings()
    except ValidationError as e:
        configure_logging()
        print(json.dumps(ChannelReply.failure(e, code="ConfigError").to_wire()))
        return 1

    configure_logging(settings.log_level)

    try:
        count = asyncio.run(run(settings, sys.stdin, sys.stdout))
    except ConfigError as e:
        print(json.dumps(ChannelReply.failure(e).to_wire()))
        return 1

    logger.info("Handled %d request(s)", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
