"""MCP Server for the scientific calculator

Exposes headless calculator sessions as MCP tools so an assistant can press
buttons and read the display.
"""

import asyncio
import logging
import sys
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any

from mcp.server.fastmcp import FastMCP

from scicalc.config import CalculatorConfig
from scicalc.engine.keymap import BUTTONS, KEYS
from scicalc.engine.session import CalculatorSession, Cancel
from scicalc.engine.state import CalculatorState
from scicalc.storage import StateStore

logger = logging.getLogger("scicalc.server")


def _asyncio_schedule(delay: float, callback: Callable[[], None]) -> Cancel:
    return asyncio.get_running_loop().call_later(delay, callback).cancel


def snapshot(state: CalculatorState) -> dict[str, Any]:
    """What a user would see on the calculator right now."""
    return {
        "display": state.display,
        "error": state.error or None,
        "pending_operand": state.pending_operand,
        "pending_operator": state.pending_operator,
        "memory": state.memory,
        "angle_mode": state.angle_mode.value,
        "second_mode": state.second_mode,
        "dark_mode": state.dark_mode,
        "celebrating": state.celebrating,
    }


class SessionManager:
    """Manages open calculator sessions."""

    def __init__(self, store: StateStore | None = None):
        self.store = store
        self.sessions: dict[str, CalculatorSession] = {}

    def generate_session_id(self) -> str:
        """Generate a unique session ID."""
        return f"calc_{uuid.uuid4().hex[:8]}"

    def open(self) -> str:
        """Open a session with the persisted memory and theme."""
        session_id = self.generate_session_id()
        session = CalculatorSession(store=self.store, schedule=_asyncio_schedule)
        session.load_preferences()
        self.sessions[session_id] = session
        logger.info(f"Opened calculator session {session_id}")
        return session_id

    def get(self, session_id: str) -> CalculatorSession | None:
        return self.sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        session = self.sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        logger.info(f"Closed calculator session {session_id}")
        return True

    def close_all(self) -> None:
        for session_id in list(self.sessions):
            self.close(session_id)


# Initialize MCP server and session manager
mcp = FastMCP("Scientific Calculator")
session_manager = SessionManager(StateStore(CalculatorConfig.from_env().state_file))


def _unknown_session(session_id: str) -> dict[str, Any]:
    return {
        "status": "error",
        "error": f"Calculator session {session_id} not found",
        "session_id": session_id
    }


@mcp.tool()
def list_buttons() -> dict[str, Any]:
    """List the calculator's buttons and keyboard keys.

    Returns:
        Button labels accepted by press_buttons and keys accepted by send_keys.
    """
    return {
        "status": "success",
        "buttons": list(BUTTONS),
        "keys": list(KEYS)
    }


@mcp.tool()
async def open_calculator() -> dict[str, Any]:
    """Open a new calculator session.

    Returns:
        The session ID and the initial calculator state.
    """
    session_id = session_manager.open()
    return {
        "status": "success",
        "session_id": session_id,
        "state": snapshot(session_manager.sessions[session_id].state),
        "opened_at": datetime.now().isoformat()
    }


@mcp.tool()
async def press_buttons(session_id: str, buttons: list[str]) -> dict[str, Any]:
    """Press calculator buttons in order.

    Args:
        session_id: ID returned by open_calculator
        buttons: Button labels, e.g. ["9", "9", "+", "3", "3", "="]

    Returns:
        The calculator state after the last press.
    """
    session = session_manager.get(session_id)
    if session is None:
        return _unknown_session(session_id)

    try:
        for label in buttons:
            session.press(label)
    except ValueError as e:
        return {
            "status": "error",
            "error": str(e),
            "session_id": session_id,
            "state": snapshot(session.state)
        }

    return {
        "status": "success",
        "session_id": session_id,
        "state": snapshot(session.state)
    }


@mcp.tool()
async def send_keys(session_id: str, keys: list[str]) -> dict[str, Any]:
    """Send keyboard keys to a calculator session.

    Args:
        session_id: ID returned by open_calculator
        keys: Keys such as "7", "*", "Enter" or "Escape"; unbound keys are ignored

    Returns:
        The calculator state after the last key.
    """
    session = session_manager.get(session_id)
    if session is None:
        return _unknown_session(session_id)

    for key in keys:
        session.press_key(key)
    return {
        "status": "success",
        "session_id": session_id,
        "state": snapshot(session.state)
    }


@mcp.tool()
def get_calculator_state(session_id: str) -> dict[str, Any]:
    """Get the current state of a calculator session.

    Args:
        session_id: ID returned by open_calculator

    Returns:
        Display, error, pending operation, memory and mode flags.
    """
    session = session_manager.get(session_id)
    if session is None:
        return _unknown_session(session_id)

    return {
        "status": "success",
        "session_id": session_id,
        "state": snapshot(session.state),
        "timestamp": datetime.now().isoformat()
    }


@mcp.tool()
def close_calculator(session_id: str) -> dict[str, Any]:
    """Close a calculator session.

    Args:
        session_id: ID of the session to close

    Returns:
        Close result.
    """
    if not session_manager.close(session_id):
        return _unknown_session(session_id)
    return {
        "status": "success",
        "session_id": session_id,
        "closed_at": datetime.now().isoformat()
    }


def main():
    """Main entry point for the MCP server."""
    # MCP speaks over stdout, so logs go to stderr
    logging.basicConfig(
        level=CalculatorConfig.from_env().log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    try:
        logger.info("Starting scientific calculator MCP server")
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
    finally:
        session_manager.close_all()


if __name__ == "__main__":
    main()
