"""Command registry: single source of truth for command → handler mapping.

Handlers are bound to a slash-command and a description in **one** place
with the ``@registry.register`` decorator.  The same entries feed the
dispatcher in :mod:`hellobot.bot` and the command list published with
``setMyCommands`` at start-up.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable, Optional

from botapi.models import BotCommand, Message

# ── Handler signature ────────────────────────────────────────────────────────

HandlerFunc = Callable[[Any, Message, "list[str]"], Awaitable[None]]


# ── Registry entry ───────────────────────────────────────────────────────────

@dataclasses.dataclass(frozen=True)
class CommandEntry:
    """Metadata for a single registered slash-command."""
    command: str              # e.g. "/hello"
    description: str          # shown in /help and the client's command menu
    handler: HandlerFunc      # async (client, message, args) -> None


@dataclasses.dataclass(frozen=True)
class ParsedCommand:
    command: str
    args: list[str]


def parse_command(text: Optional[str], bot_username: Optional[str] = None) -> Optional[ParsedCommand]:
    """Parse ``/<command>[@<botusername>] [args...]``.

    Returns ``None`` for plain text and for commands addressed to another
    bot.  Command names are lower-cased.
    """
    if not text or not text.startswith("/"):
        return None
    head, *args = text.split()
    name, _, target = head.partition("@")
    if name == "/":
        return None
    if target and (bot_username is None or target.lower() != bot_username.lower()):
        return None
    return ParsedCommand(command=name.lower(), args=args)


# ── Registry ─────────────────────────────────────────────────────────────────

class CommandRegistry:
    """Singleton command registry.

    Usage::

        registry = CommandRegistry()

        @registry.register("/ping", description="Ping")
        async def handle_ping(client, message, args) -> None: ...

        await registry.dispatch("/ping", client, message, [])
    """

    _instance: CommandRegistry | None = None
    _entries: dict[str, CommandEntry]

    def __new__(cls) -> CommandRegistry:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            cls._instance = inst
        return cls._instance

    # ── decorator ────────────────────────────────────────────────────────

    def register(self, command: str, *, description: str) -> Callable[[HandlerFunc], HandlerFunc]:
        """Decorator that registers the wrapped coroutine for *command*."""
        def decorator(func: HandlerFunc) -> HandlerFunc:
            self._entries[command] = CommandEntry(command=command, description=description, handler=func)
            return func
        return decorator

    # ── lookup helpers ───────────────────────────────────────────────────

    def get(self, command: str) -> CommandEntry | None:
        """Return the entry for *command*, or ``None``."""
        return self._entries.get(command)

    def entries(self) -> dict[str, CommandEntry]:
        """Return a copy of all registered commands."""
        return dict(self._entries)

    def bot_commands(self) -> list[BotCommand]:
        """Registered commands in the shape expected by ``setMyCommands``."""
        return [
            BotCommand(command=entry.command.lstrip("/"), description=entry.description)
            for entry in self._entries.values()
        ]

    async def dispatch(self, command: str, client: Any, message: Message, args: list[str]) -> bool:
        """Look up *command* and invoke its handler.

        Returns ``True`` if a handler was found and called, ``False`` otherwise.
        """
        entry = self._entries.get(command)
        if entry is None:
            return False
        await entry.handler(client, message, args)
        return True


# Module-level singleton, import this everywhere.
registry = CommandRegistry()
