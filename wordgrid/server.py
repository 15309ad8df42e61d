import logging

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks
from fastapi.responses import JSONResponse

from wordgrid.grid import Grid
from wordgrid.metrics import configure_logging
from wordgrid.schemas import (
    ContainsRequest,
    ContainsResponse,
    GridRequest,
    SolveResponse,
    WordCheckResponse,
    WordListResponse,
)
from wordgrid.settings import settings

configure_logging(settings.DEBUG)
logger = logging.getLogger("wordgrid")

# Populated at startup
_trie = None


def _build_grid(req: GridRequest) -> Grid:
    size = req.size if req.size is not None else settings.GRID_SIZE
    if size > settings.MAX_GRID_SIZE:
        raise HTTPException(400, f"Grid size {size} exceeds the maximum of {settings.MAX_GRID_SIZE}")
    try:
        if req.letters is None:
            return Grid.random(size)
        return Grid(size, req.letters)
    except ValueError as e:
        raise HTTPException(400, str(e))


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        from wordgrid.lexicon import load_trie
        logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
        _trie = load_trie(str(settings.DICTIONARY_PATH))
        logger.info("Trie loaded")

        yield

        _trie = None

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "words_loaded": len(_trie) if _trie is not None else 0}

    @application.post("/solve", response_model=SolveResponse)
    async def solve(req: GridRequest, background_tasks: BackgroundTasks):
        from wordgrid.metrics import StageTimer
        from wordgrid.solver import WordSearch, rank
        from wordgrid.notifier import send_notification

        timer = StageTimer()

        with timer.stage("grid"):
            grid = _build_grid(req)

        logger.info("Grid %dx%d: %s", grid.size, grid.size, " / ".join(grid.rows()))

        with timer.stage("solve"):
            found = WordSearch(grid, _trie).solve()
        timer.count("cells", grid.vertex_count)
        timer.count("words_found", len(found))

        with timer.stage("rank"):
            all_words = rank(found)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning top %d)", len(all_words), len(words))

        if settings.NOTIFY_ENABLED:
            background_tasks.add_task(
                send_notification, all_words, grid.size,
                settings.NTFY_TOPIC, settings.NTFY_URL,
                settings.NOTIFY_WORDS_PER_GROUP,
            )

        return SolveResponse(
            size=grid.size,
            letters=grid.letters(),
            rows=grid.rows(),
            rendered=grid.render(),
            words=words,
            word_count=len(all_words),
            processing_time=timer.total_ms,
            stage_timings=timer.summary(),
            counts=timer.counts,
        )

    @application.post("/contains", response_model=ContainsResponse)
    async def contains(req: ContainsRequest):
        from wordgrid.solver import WordSearch

        grid = _build_grid(req)
        found = WordSearch(grid, _trie).contains(req.word)
        logger.info("contains word=%s found=%s", req.word, found)
        return ContainsResponse(word=req.word, found=found)

    @application.get("/words", response_model=WordListResponse)
    async def words_with_prefix(prefix: str = ""):
        words = _trie.get_words(prefix)
        return WordListResponse(words=words, count=len(words))

    @application.get("/words/length/{length}", response_model=WordListResponse)
    async def words_of_length(length: int):
        words = _trie.get_words_of_length(length)
        return WordListResponse(words=words, count=len(words))

    @application.get("/words/{word}", response_model=WordCheckResponse)
    async def check_word(word: str):
        return WordCheckResponse(word=word, valid=_trie.contains_word(word))

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            errors = {"body": "expected a JSON object of setting values"}
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        errors = update_settings(settings, **body)
        configure_logging(settings.DEBUG)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
