"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket

from .config import GameConfig
from .models import Snapshot

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def broadcast(self, message: str):
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_text(message)
            except Exception as e:
                logger.debug("dropping connection after failed send: %s", e)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)


def build_state_msg(snapshot: Snapshot) -> str:
    return json.dumps({"type": "state", **snapshot.to_dict()})


def build_config_msg(config: GameConfig) -> str:
    return json.dumps({"type": "config", **config.to_options()})


def build_pause_msg(snapshot: Snapshot) -> str:
    return json.dumps({"type": "pause_state", "state": snapshot.phase.value})
