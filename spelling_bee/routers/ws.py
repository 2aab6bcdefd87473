from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from spelling_bee.dictionary import service as dict_service
from spelling_bee.schemas import PuzzleRequest

router = APIRouter()

@router.websocket("/solve")
async def solve_endpoint(websocket: WebSocket):
    await websocket.accept()
    word_lists = websocket.app.state.word_lists

    try:
        while True:
            data = await websocket.receive_json()
            try:
                request = PuzzleRequest.model_validate(data)
            except ValidationError as exc:
                await websocket.send_json({"type": "error", "error": str(exc)})
                continue
            word_data = word_lists.active()
            if word_data is None:
                await websocket.send_json({"type": "error", "error": "No word list is loaded"})
                continue
            result = dict_service.solve(word_data, request)
            await websocket.send_json({"type": "solutions", **result.model_dump(by_alias=True)})
    except WebSocketDisconnect:
        return
