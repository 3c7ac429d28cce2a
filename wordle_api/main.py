# FastAPI server implementing the Wordle API.
# Provides:
# - GET    /api/dictionary: number of words in the dictionary
# - POST   /api/dictionary: add words
# - DELETE /api/dictionary: remove a word
# - POST   /api/word: start a round for the calling client
# - GET    /api/word: the secret word of the caller's round
# - POST   /api/guess: submit a guess and get a c/p/w verdict
#
# Run: python -m wordle_api  (or uvicorn wordle_api.main:app --port 8000)

from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from . import __version__
from .config import CORS_ORIGINS, SEED_WORDS_PATH
from .db import DictionaryStore
from .game import GameStore, NoActiveRound, RoundAlreadyActive
from .identity import TOKEN_HEADER, ClientIdentifier, InvalidClientToken
from .models import (
    AddWordsRequest, RemoveWordRequest, GuessRequest, GuessResponse, WordResponse, DictionaryStats
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

def get_dictionary(request: Request) -> DictionaryStore:
    return request.app.state.dictionary

def get_games(request: Request) -> GameStore:
    return request.app.state.games

def get_client_id(request: Request) -> str:
    identifier: ClientIdentifier = request.app.state.identifier
    host = request.client.host if request.client else None
    try:
        return identifier.resolve(host, request.headers.get(TOKEN_HEADER))
    except InvalidClientToken as e:
        raise HTTPException(status_code=401, detail=str(e))

@router.get("/dictionary", response_model=DictionaryStats)
def dictionary_stats(dictionary: DictionaryStore = Depends(get_dictionary)):
    return DictionaryStats(count=dictionary.count_words())

@router.post("/dictionary", status_code=201)
def add_words(req: AddWordsRequest, dictionary: DictionaryStore = Depends(get_dictionary)):
    dictionary.add_many_words(req.words)
    return Response(status_code=201)

@router.delete("/dictionary", status_code=204)
def remove_word(req: RemoveWordRequest, dictionary: DictionaryStore = Depends(get_dictionary)):
    dictionary.remove_word(req.word)
    return Response(status_code=204)

@router.post("/word", status_code=204)
def start_round(
    request: Request,
    client_id: str = Depends(get_client_id),
    dictionary: DictionaryStore = Depends(get_dictionary),
    games: GameStore = Depends(get_games),
):
    if games.get(client_id) is not None:
        raise HTTPException(status_code=409, detail="A round is already in progress")
    word = dictionary.get_random_word()
    if word is None:
        raise HTTPException(status_code=404, detail="Dictionary is empty")
    try:
        games.start(client_id, word)
    except RoundAlreadyActive as e:
        raise HTTPException(status_code=409, detail=str(e))

    token = request.app.state.identifier.issue(client_id)
    return Response(status_code=204, headers={TOKEN_HEADER: token})

@router.get("/word", response_model=WordResponse)
def current_word(client_id: str = Depends(get_client_id), games: GameStore = Depends(get_games)):
    rnd = games.get(client_id)
    if rnd is None:
        raise HTTPException(status_code=404, detail="No round in progress")
    return WordResponse(word=rnd.word)

@router.post("/guess", response_model=GuessResponse)
def guess(
    req: GuessRequest,
    client_id: str = Depends(get_client_id),
    dictionary: DictionaryStore = Depends(get_dictionary),
    games: GameStore = Depends(get_games),
):
    try:
        games.ensure_active(client_id)
    except NoActiveRound as e:
        raise HTTPException(status_code=404, detail=str(e))

    # unknown words do not use up a guess
    if not dictionary.has_word(req.guess):
        raise HTTPException(status_code=404, detail="Guess is not in the dictionary")

    try:
        result = games.submit_guess(client_id, req.guess)
    except NoActiveRound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return GuessResponse(result=result)

async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

def create_app(
    dictionary: Optional[DictionaryStore] = None,
    games: Optional[GameStore] = None,
    identifier: Optional[ClientIdentifier] = None,
    seed_path: Optional[Path] = SEED_WORDS_PATH,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.dictionary.init_db()
        if seed_path is not None:
            app.state.dictionary.load_word_file(seed_path)
        logger.info("Dictionary ready at %s", app.state.dictionary.database_url)
        yield
        app.state.games.clear()

    app = FastAPI(title="Wordle API", version=__version__, lifespan=lifespan)
    app.state.dictionary = dictionary if dictionary is not None else DictionaryStore()
    app.state.games = games if games is not None else GameStore()
    app.state.identifier = identifier if identifier is not None else ClientIdentifier()

    # CORS for dev convenience; expose the token header to browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[TOKEN_HEADER],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)
    return app

app = create_app()
