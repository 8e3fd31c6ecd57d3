from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .settings import AppSettings, get_settings


@dataclass(frozen=True)
class MoodProfile:
	category: str
	difficulty: str

	def as_params(self) -> dict[str, str]:
		# API Ninjas query parameter names
		return {"type": self.category, "difficulty": self.difficulty}


MOOD_PROFILES: Mapping[str, MoodProfile] = MappingProxyType(
	{
		"stressed": MoodProfile(category="stretching", difficulty="beginner"),
		"anxious": MoodProfile(category="stretching", difficulty="intermediate"),
		"sad": MoodProfile(category="cardio", difficulty="beginner"),
		"unmotivated": MoodProfile(category="strength", difficulty="beginner"),
		"energetic": MoodProfile(category="cardio", difficulty="intermediate"),
		"happy": MoodProfile(category="cardio", difficulty="intermediate"),
	}
)


@dataclass(frozen=True)
class AggregatorConfig:
	"""Everything the aggregator reads, fixed for the lifetime of the process."""

	api_key: str | None
	exercise_url: str
	quote_url: str
	timeout: float | None = 10.0
	profiles: Mapping[str, MoodProfile] = field(default_factory=lambda: MOOD_PROFILES)

	def profile_for(self, mood: str) -> MoodProfile | None:
		return self.profiles.get(normalize_mood(mood))


def normalize_mood(mood: str | None) -> str:
	return (mood or "").lower()


def build_config(settings: AppSettings) -> AggregatorConfig:
	return AggregatorConfig(
		api_key=settings.API_NINJAS_KEY or None,
		exercise_url=settings.EXERCISE_API_URL,
		quote_url=settings.QUOTE_API_URL,
		timeout=settings.HTTP_TIMEOUT,
	)


@lru_cache(maxsize=1)
def get_aggregator_config() -> AggregatorConfig:
	return build_config(get_settings())
