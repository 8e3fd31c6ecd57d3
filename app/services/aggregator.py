from __future__ import annotations

import asyncio
import random
from typing import Any, Dict, List

import httpx

from ..errors import ConfigurationError, InvalidMoodError, NoResultsError, UpstreamError
from ..log import get_logger
from ..moods import AggregatorConfig, normalize_mood
from ..schemas import ExerciseRecord, QuoteRecord, RecommendationResponse
from ..settings import get_settings
from .base import ExerciseSource, QuoteSource

logger = get_logger(__name__, get_settings().LOG_LEVEL)

DEFAULT_QUOTE_TEXT = "Keep going. Small steps still count."
DEFAULT_QUOTE_AUTHOR = "Unknown"
DEFAULT_EQUIPMENT = "Bodyweight / simple equipment"


def format_equipment(value: Any) -> str:
	if isinstance(value, (list, tuple)):
		return ", ".join(str(v) for v in value)
	return str(value) if value else DEFAULT_EQUIPMENT


def extract_quote(payload: Any) -> QuoteRecord:
	# ZenQuotes answers with [{"q": ..., "a": ..., "h": ...}]
	raw = payload[0] if isinstance(payload, list) and payload else payload
	if not isinstance(raw, dict):
		raw = {}
	text = raw.get("q") or raw.get("quote") or DEFAULT_QUOTE_TEXT
	author = raw.get("a") or raw.get("author") or DEFAULT_QUOTE_AUTHOR
	return QuoteRecord(text=str(text), author=str(author))


def _as_text(value: Any, sep: str = ", ") -> str | None:
	# upstream fields are passed through, but lists and scalars become display text
	if value is None:
		return None
	if isinstance(value, (list, tuple)):
		return sep.join(str(v) for v in value)
	return str(value)


def to_exercise_record(item: Dict[str, Any]) -> ExerciseRecord:
	return ExerciseRecord(
		name=_as_text(item.get("name")),
		category=_as_text(item.get("type")),
		target_muscle=_as_text(item.get("muscle")),
		difficulty_level=_as_text(item.get("difficulty")),
		equipment=format_equipment(item.get("equipments")),
		instructions=_as_text(item.get("instructions"), sep=" "),
	)


def _describe_failure(exc: Exception) -> str:
	if isinstance(exc, httpx.HTTPStatusError):
		try:
			body: Any = exc.response.json()
		except ValueError:
			# error body is not JSON; log the raw text instead
			body = exc.response.text
		return f"{exc.response.status_code} from {exc.request.url}: {body}"
	return str(exc) or exc.__class__.__name__


async def recommend(
	mood: str | None,
	config: AggregatorConfig,
	*,
	exercises: ExerciseSource,
	quotes: QuoteSource,
	rng: random.Random | None = None,
) -> RecommendationResponse:
	key = normalize_mood(mood)
	profile = config.profile_for(key) if key else None
	if profile is None:
		raise InvalidMoodError()
	if not config.api_key:
		raise ConfigurationError()

	exercise_task = asyncio.ensure_future(exercises.search(profile))
	quote_task = asyncio.ensure_future(quotes.random_quote())
	try:
		exercise_payload, quote_payload = await asyncio.gather(exercise_task, quote_task)
	except Exception as exc:
		exercise_task.cancel()
		quote_task.cancel()
		# collect the sibling so its outcome is not reported as unretrieved
		await asyncio.gather(exercise_task, quote_task, return_exceptions=True)
		logger.error("Upstream call failed for mood=%s: %s: %s", key, type(exc).__name__, _describe_failure(exc))
		raise UpstreamError() from exc

	candidates: List[Dict[str, Any]] = []
	if isinstance(exercise_payload, list):
		candidates = [e for e in exercise_payload if isinstance(e, dict)]
	if not candidates:
		logger.warning("No exercises for mood=%s (%s/%s)", key, profile.category, profile.difficulty)
		raise NoResultsError()

	picked = rng.choice(candidates) if rng is not None else random.choice(candidates)
	return RecommendationResponse(
		mood=key,
		exercise=to_exercise_record(picked),
		quote=extract_quote(quote_payload),
	)
