from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Dict, List, Literal

import socketio
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from . import config
from .charvec import vector_to_string
from .dictionary import WordData, service as dict_service, standard_word_lists
from .generator import ESTIMATORS, SCORE_LOWER_BOUND, SCORE_UPPER_BOUND, generate
from .managers.word_lists import WordListManager
from .puzzle import total_score
from .routers import ws
from .schemas import (
    GeneratedPuzzle, PuzzleRequest, PuzzleSummary, SolveResult, WordInspection, WordListsView,
)


# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=config.CORS_ORIGINS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await app.state.word_lists.load_first_if_present()
    yield


app = FastAPI(title="Spelling Bee Server", version="0.1.0", lifespan=lifespan)
app.state.word_lists = WordListManager(sio, standard_word_lists(config.WORDS_DIR))
app.include_router(ws.router, prefix='/ws')

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)


def get_word_lists(request: Request) -> WordListManager:
    return request.app.state.word_lists


def get_active(word_lists: WordListManager = Depends(get_word_lists)) -> WordData:
    data = word_lists.active()
    if data is None:
        raise HTTPException(status_code=409, detail='No word list is loaded')
    return data


# REST Endpoints
@app.get('/wordlists')
async def list_word_lists(word_lists: WordListManager = Depends(get_word_lists)) -> WordListsView:
    return word_lists.view()

@app.post('/wordlists/{list_id}/select')
async def select_word_list(list_id: str, word_lists: WordListManager = Depends(get_word_lists)) -> WordListsView:
    if list_id not in word_lists:
        raise HTTPException(status_code=404, detail=f'Unknown word list: {list_id}')
    await word_lists.select(list_id)
    return word_lists.view()

@app.post('/solve')
async def solve(request: PuzzleRequest, data: WordData = Depends(get_active)) -> SolveResult:
    return dict_service.solve(data, request)

@app.get('/words/{word}')
async def inspect_word(word: str, data: WordData = Depends(get_active)) -> WordInspection:
    report = dict_service.inspect(data, word)
    if report is None:
        raise HTTPException(status_code=422, detail='Empty word')
    return report

@app.get('/puzzles')
async def list_puzzles(limit: int = 10, data: WordData = Depends(get_active)) -> Dict[str, List[PuzzleSummary]]:
    limit = max(0, min(limit, config.PUZZLE_LIMIT))
    puzzles = data.puzzle_master.puzzles()[:limit]
    return {
        'puzzles': [
            PuzzleSummary(required=vector_to_string(p.required), optional=vector_to_string(p.optional))
            for p in puzzles
        ]
    }

@app.get('/puzzles/generated')
async def generated_puzzles(
    estimator: Literal['score', 'solution-count'] = 'score',
    lower: int = SCORE_LOWER_BOUND,
    upper: int = SCORE_UPPER_BOUND,
    limit: int = 10,
    seed: int = 0,
    data: WordData = Depends(get_active),
) -> Dict[str, List[GeneratedPuzzle]]:
    limit = max(0, min(limit, config.PUZZLE_LIMIT))
    estimate = ESTIMATORS[estimator]
    index = data.puzzle_master
    out = []
    for p in generate(index, estimate, lower, upper, seed)[:limit]:
        solutions = index.solutions_to(p)
        required, optional = p.letters()
        out.append(GeneratedPuzzle(
            required=required,
            optional=optional,
            maxScore=total_score(solutions),
            solutionCount=len(solutions),
            accessibility=estimate(p, solutions),
        ))
    return {'puzzles': out}

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('wordlist:status', app.state.word_lists.view().model_dump(by_alias=True), to=sid)

@sio.on('wordlist:select')
async def wordlist_select(sid, list_id):
    word_lists: WordListManager = app.state.word_lists
    if not isinstance(list_id, str) or list_id not in word_lists:
        await sio.emit('wordlist:error', {'error': f'Unknown word list: {list_id}'}, to=sid)
        return
    await word_lists.select(list_id)

@sio.on('puzzle:solve')
async def puzzle_solve(sid, payload):
    try:
        request = PuzzleRequest.model_validate(payload)
    except ValidationError as exc:
        await sio.emit('puzzle:error', {'error': str(exc)}, to=sid)
        return
    data = app.state.word_lists.active()
    if data is None:
        await sio.emit('puzzle:error', {'error': 'No word list is loaded'}, to=sid)
        return
    result = dict_service.solve(data, request)
    await sio.emit('puzzle:solutions', result.model_dump(by_alias=True), to=sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn spelling_bee.main:application --reload --host 0.0.0.0 --port 8000
