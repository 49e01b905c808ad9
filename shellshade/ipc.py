"""
Request dispatch between a UI process and the installers.

Channels map one-to-one onto API calls. serve() runs a JSON-lines loop so
a UI can drive shellshade over a pipe:

    -> {"id": 1, "channel": "install:alacritty", "args": ["dracula"]}
    <- {"id": 1, "result": {"success": true, "path": "...", "instructions": "..."}}

Requests are handled one at a time, in order.
"""

from __future__ import annotations
import inspect
import json
import logging
from typing import Any, Callable, Dict, IO

from .api import ShellShadeAPI

logger = logging.getLogger(__name__)


class Channel:
    INSTALL_TERMINAL_APP = "install:terminal-app"
    INSTALL_ITERM2 = "install:iterm2"
    INSTALL_WINDOWS_TERMINAL = "install:windows-terminal"
    INSTALL_ALACRITTY = "install:alacritty"
    INSTALL_KITTY = "install:kitty"
    INSTALL_SET_TERMINAL_DEFAULT = "install:set-terminal-default"
    INSTALL_DETECT = "install:detect"
    SYSTEM_GET_PLATFORM = "system:get-platform"


class UnknownChannelError(LookupError):
    """No handler registered for a channel."""


class BadArgumentsError(ValueError):
    """Arguments do not fit the channel's handler."""


class IpcRouter:
    """Channel name -> handler registry."""

    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def handle(self, channel: str, handler: Callable[..., Any]) -> None:
        if channel in self._handlers:
            raise ValueError(f"Handler already registered for {channel}")
        self._handlers[channel] = handler

    def invoke(self, channel: str, *args: Any) -> Any:
        handler = self._handlers.get(channel)
        if handler is None:
            raise UnknownChannelError(f"No handler for channel {channel!r}")
        try:
            inspect.signature(handler).bind(*args)
        except TypeError as e:
            raise BadArgumentsError(f"Bad arguments for {channel}: {e}") from None
        logger.debug(f"invoke {channel} {args!r}")
        return handler(*args)

    @property
    def channels(self) -> list[str]:
        return sorted(self._handlers)


def register_install_handlers(router: IpcRouter, api: ShellShadeAPI) -> None:
    """Wire every installer channel to the API."""

    def install_handler(target: str) -> Callable[[str], dict]:
        def handler(theme_id: str) -> dict:
            return api.install(target, theme_id).to_dict()
        return handler

    router.handle(Channel.INSTALL_TERMINAL_APP, install_handler("terminal-app"))
    router.handle(Channel.INSTALL_ITERM2, install_handler("iterm2"))
    router.handle(Channel.INSTALL_WINDOWS_TERMINAL, install_handler("windows-terminal"))
    router.handle(Channel.INSTALL_ALACRITTY, install_handler("alacritty"))
    router.handle(Channel.INSTALL_KITTY, install_handler("kitty"))
    router.handle(
        Channel.INSTALL_SET_TERMINAL_DEFAULT,
        lambda theme_id: api.set_terminal_default(theme_id).to_dict(),
    )
    router.handle(Channel.SYSTEM_GET_PLATFORM, api.platform)
    router.handle(Channel.INSTALL_DETECT, api.detect_installed)


def handle_line(router: IpcRouter, line: str) -> dict:
    """Decode one request line and build its response."""
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        return {"id": None, "error": f"Invalid request: {e}"}
    if not isinstance(request, dict):
        return {"id": None, "error": "Invalid request: expected an object"}

    request_id = request.get("id")
    channel = request.get("channel")
    args = request.get("args") or []
    if not isinstance(channel, str) or not isinstance(args, list):
        return {"id": request_id, "error": "Invalid request: need 'channel' and list 'args'"}
    # Every channel argument is a theme id
    if not all(isinstance(arg, str) for arg in args):
        return {"id": request_id, "error": f"Bad arguments for {channel}: expected string arguments"}

    try:
        return {"id": request_id, "result": router.invoke(channel, *args)}
    except (UnknownChannelError, BadArgumentsError) as e:
        return {"id": request_id, "error": str(e)}
    except Exception as e:
        logger.exception(f"Handler for {channel} failed")
        return {"id": request_id, "error": f"Internal error in {channel}: {e}"}


def serve(router: IpcRouter, instream: IO[str], outstream: IO[str]) -> int:
    """
    Answer JSON-lines requests until EOF.

    Returns:
        Number of requests handled
    """
    handled = 0
    for line in instream:
        if not line.strip():
            continue
        response = handle_line(router, line)
        outstream.write(json.dumps(response, ensure_ascii=False) + "\n")
        outstream.flush()
        handled += 1
    logger.debug(f"IPC loop finished after {handled} request(s)")
    return handled
