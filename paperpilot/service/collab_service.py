"""
Document rooms for collaborative editing.

A socket joins a room by doc id; text updates are relayed to every other
socket in the same room. Lives in process memory only.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Set

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


class RoomManager:
    def __init__(self):
        self.rooms: Dict[str, Set[WebSocket]] = {}

    def join(self, doc_id: str, ws: WebSocket) -> None:
        self.rooms.setdefault(doc_id, set()).add(ws)
        logger.info(f"📝 joined doc={doc_id} members={len(self.rooms[doc_id])}")

    def leave_all(self, ws: WebSocket) -> None:
        for doc_id in list(self.rooms):
            members = self.rooms[doc_id]
            members.discard(ws)
            if not members:
                del self.rooms[doc_id]

    def members(self, doc_id: str) -> Set[WebSocket]:
        return set(self.rooms.get(doc_id, ()))

    async def broadcast(self, doc_id: str, sender: WebSocket, message: Dict[str, Any]) -> int:
        """Send to everyone in the room except ``sender``; returns the count."""
        sent = 0
        for ws in self.members(doc_id):
            if ws is sender:
                continue
            try:
                await ws.send_json(message)
            except (WebSocketDisconnect, RuntimeError, OSError) as e:
                # peer went away mid-broadcast
                logger.info(f"📝 dropping dead socket from doc={doc_id}: {e!r}")
                self.leave_all(ws)
                continue
            sent += 1
        return sent
