"""
shared_preferences — Hello World

One backing domain per application.  The store only sees keys carrying
its prefix; everything else in the domain belongs to someone else.
"""

import asyncio
import tempfile

from shared_preferences import PreferenceStore, UnsupportedValueKindError
from shared_preferences.backends import SQLiteBackend
from shared_preferences.channel import InProcessMessenger, PreferencesApi, channel_name


async def main():
    with tempfile.TemporaryDirectory() as tmp:
        # ──────────────────────────────────────
        #  1. Open the domain and the store
        # ──────────────────────────────────────
        backend = SQLiteBackend(f"{tmp}/prefs.db", domain="com.example.hello")
        store = PreferenceStore(backend)

        # ──────────────────────────────────────
        #  2. Typed writes
        # ──────────────────────────────────────
        await store.set_bool("flutter.dark_mode", True)
        await store.set_double("flutter.volume", 0.8)
        await store.set_value("flutter.username", "alice")
        await store.set_value("flutter.recent", ["doc_a", "doc_b"])

        try:
            await store.set_value("flutter.settings", {"nested": True})
        except UnsupportedValueKindError as e:
            print(f"  [REJECTED] {e}")

        print("All:", await store.get_all())

        # ──────────────────────────────────────
        #  3. Same operations over the channel
        # ──────────────────────────────────────
        messenger = InProcessMessenger()
        PreferencesApi.setup(messenger, store)

        await messenger.send(channel_name("remove"), ["flutter.volume"])
        print("After remove:", await messenger.send(channel_name("getAll"), []))

        await messenger.send(channel_name("clear"), [])
        print("After clear:", await store.get_all())

        await backend.close()


if __name__ == "__main__":
    asyncio.run(main())
