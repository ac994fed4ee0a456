"""
endb — Hello World

One interface, any backend. Keys are namespaced, values are encoded
transparently, and nested fields can be read and written by path.
"""

import asyncio
import sys

from endb import BackendError, Endb


def log_error(error) -> None:
    print(f"  [ERROR] {error}")


async def main(uri: str | None = None):
    # ──────────────────────────────────────
    #  1. Create two stores sharing one backend
    # ──────────────────────────────────────
    shared: dict = {}
    users = Endb(uri, namespace="users") if uri else Endb(store=shared, namespace="users")
    sessions = Endb(uri, namespace="sessions") if uri else Endb(store=shared, namespace="sessions")

    users.on("error", log_error)
    sessions.on("error", log_error)

    # ──────────────────────────────────────
    #  2. Whole-value writes and reads
    # ──────────────────────────────────────
    print("=== Whole values ===\n")

    await users.set("alice", {"name": "Alice", "roles": ["admin"]})
    await users.set("bob", {"name": "Bob", "roles": []})
    await sessions.set("alice", {"token": b"\x00\x01secret"})

    print(f"  users:    {await users.keys()}")
    print(f"  sessions: {await sessions.keys()}")
    print(f"  alice:    {await users.get('alice')}")

    # ──────────────────────────────────────
    #  3. Nested paths
    # ──────────────────────────────────────
    print("\n=== Nested paths ===\n")

    await users.set("alice", "dark", "prefs.theme")
    await users.set("alice", "editor", "roles[1]")
    print(f"  alice:       {await users.get('alice')}")
    print(f"  theme:       {await users.get('alice', 'prefs.theme')}")
    print(f"  has prefs.x: {await users.has('alice', 'prefs.x')}")

    await users.delete("alice", "prefs")
    print(f"  after unset: {await users.get('alice')}")

    # ──────────────────────────────────────
    #  4. Cleanup
    # ──────────────────────────────────────
    print("\n=== Cleanup ===\n")

    print(f"  delete bob:     {await users.delete('bob')}")
    print(f"  delete nobody:  {await users.delete('nobody')}")
    await sessions.clear()
    print(f"  sessions left:  {await sessions.entries()}")
    print(f"  users left:     {await users.entries()}")

    await users.close()
    await sessions.close()


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
    except BackendError as e:
        sys.exit(str(e))
