"""Real-time channel handling: lifecycle, parsing, errors and the main loop."""

from .manager import handle_websocket_connection

__all__ = ["handle_websocket_connection"]
