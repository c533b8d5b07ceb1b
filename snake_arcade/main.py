"""FastAPI application — HTTP routes and WebSocket endpoint."""

import json
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .config import ServerSettings, load_settings
from .connection_manager import (
    ConnectionManager, build_config_msg, build_pause_msg, build_state_msg,
)
from .constants import DIRECTIONS
from .controller import GameController
from .highscore import HighScoreStore
from .models import MOVE_EVENTS, Direction, InputEvent, Snapshot

logger = logging.getLogger(__name__)

MOVE_INPUTS = {direction: event for event, direction in MOVE_EVENTS.items()}


def parse_input(raw: str) -> Optional[InputEvent]:
    """Translate a client message into an InputEvent, or None if unusable.

    Accepted shapes: ``{"type": "input", "direction": "up"}``,
    ``{"type": "pause"}`` and ``{"type": "reset"}``.
    """
    try:
        msg = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(msg, dict):
        return None

    kind = msg.get("type")
    if kind == "input":
        d = msg.get("direction")
        if isinstance(d, str) and d in DIRECTIONS:
            return MOVE_INPUTS[Direction.from_name(d)]
    elif kind == "pause":
        return InputEvent.TOGGLE_PAUSE
    elif kind == "reset":
        return InputEvent.RESET
    return None


def build_controller(settings: ServerSettings) -> GameController:
    store = HighScoreStore(settings.high_score_file)
    controller = GameController(settings.game, high_score=store.load())
    controller.on_high_score(store.save)
    return controller


def create_app(controller: Optional[GameController] = None) -> FastAPI:
    if controller is None:
        controller = build_controller(load_settings())
    manager = ConnectionManager()

    async def broadcast_state(snapshot: Snapshot):
        await manager.broadcast(build_state_msg(snapshot))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        controller.subscribe(broadcast_state)
        yield
        controller.shutdown()
        controller.unsubscribe(broadcast_state)

    app = FastAPI(lifespan=lifespan)
    app.state.controller = controller
    app.state.manager = manager

    @app.get("/state")
    async def get_state():
        return controller.snapshot().to_dict()

    @app.get("/config")
    async def get_config():
        return controller.config.to_options()

    @app.websocket("/ws")
    async def websocket_endpoint(ws: WebSocket):
        await manager.connect(ws)
        try:
            await manager.send_personal(ws, build_config_msg(controller.config))
            await manager.send_personal(ws, build_state_msg(controller.snapshot()))
            while True:
                raw = await ws.receive_text()
                event = parse_input(raw)
                if event is None:
                    logger.debug("ignoring message %r", raw[:80])
                    continue
                changed = await controller.handle_input(event)
                if changed and event == InputEvent.TOGGLE_PAUSE:
                    await manager.broadcast(build_pause_msg(controller.snapshot()))
        except WebSocketDisconnect:
            pass
        finally:
            manager.disconnect(ws)

    return app
