from __future__ import annotations

from typing import Any, Protocol

from ..moods import MoodProfile


class ExerciseSource(Protocol):
	async def search(self, profile: MoodProfile) -> Any:
		...


class QuoteSource(Protocol):
	async def random_quote(self) -> Any:
		...
