from __future__ import annotations

import random
from pathlib import Path

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .errors import RecommendationError
from .log import get_logger
from .moods import AggregatorConfig, get_aggregator_config
from .schemas import ErrorResponse, MoodListResponse, MoodOption, RecommendationResponse
from .services.aggregator import recommend
from .services.exercise_client import ExerciseClient, get_exercise_client
from .services.quote_client import QuoteClient, get_quote_client
from .settings import get_settings

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

settings = get_settings()
logger = get_logger(__name__, settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_rng() -> random.Random | None:
	# None means the module-level random source; tests override with a seeded one
	return None


@app.exception_handler(RecommendationError)
async def _recommendation_error(request: Request, exc: RecommendationError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
	logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
	return JSONResponse(status_code=500, content={"error": RecommendationError.message})


@app.get("/health")
async def health() -> dict[str, str]:
	return {"status": "healthy", "service": settings.APP_NAME}


@app.get("/api/moods", response_model=MoodListResponse)
async def api_moods(config: AggregatorConfig = Depends(get_aggregator_config)) -> MoodListResponse:
	return MoodListResponse(
		moods=[
			MoodOption(mood=mood, type=profile.category, difficulty=profile.difficulty)
			for mood, profile in config.profiles.items()
		]
	)


@app.get(
	"/api/recommend",
	response_model=RecommendationResponse,
	responses={
		400: {"model": ErrorResponse},
		500: {"model": ErrorResponse},
		502: {"model": ErrorResponse},
	},
)
async def api_recommend(
	mood: str | None = Query(default=None),
	config: AggregatorConfig = Depends(get_aggregator_config),
	exercises: ExerciseClient = Depends(get_exercise_client),
	quotes: QuoteClient = Depends(get_quote_client),
	rng: random.Random | None = Depends(get_rng),
) -> RecommendationResponse:
	return await recommend(mood, config, exercises=exercises, quotes=quotes, rng=rng)


@app.get("/", response_class=HTMLResponse)
@app.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, config: AggregatorConfig = Depends(get_aggregator_config)) -> HTMLResponse:
	return templates.TemplateResponse(request, "index.html", {"moods": list(config.profiles)})
