import json
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from api.deps import get_room_manager
from paperpilot.service.collab_service import RoomManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["collab"])


@router.websocket("/ws")
async def collab_socket(
    websocket: WebSocket,
    rooms: RoomManager = Depends(get_room_manager),
):
    """
    JSON messages ``{"event": ..., "data": ...}``:
    - joinDoc:    data = docId
    - textUpdate: data = {docId, content}, relayed to the rest of the room
    """
    await websocket.accept()
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"event": "error", "data": "Invalid JSON"})
                continue

            event = message.get("event") if isinstance(message, dict) else None
            data = message.get("data") if isinstance(message, dict) else None

            if event == "joinDoc" and isinstance(data, str) and data:
                rooms.join(data, websocket)
                await websocket.send_json({"event": "joined", "data": data})
            elif event == "textUpdate" and isinstance(data, dict) and data.get("docId"):
                await rooms.broadcast(
                    data["docId"],
                    websocket,
                    {"event": "textUpdate", "data": data.get("content")},
                )
            else:
                await websocket.send_json({"event": "error", "data": "Unsupported message"})
    except WebSocketDisconnect:
        pass
    finally:
        rooms.leave_all(websocket)
