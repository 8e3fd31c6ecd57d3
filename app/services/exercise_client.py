from __future__ import annotations

from typing import Any

import httpx
from fastapi import Depends

from ..moods import AggregatorConfig, MoodProfile, get_aggregator_config
from .http_client import get_http_client


class ExerciseClient:
	"""API Ninjas ``/v1/exercises`` lookup."""

	def __init__(self, config: AggregatorConfig, client: httpx.AsyncClient | None = None) -> None:
		self._url = config.exercise_url
		self._api_key = config.api_key or ""
		self._client = client or httpx.AsyncClient(timeout=config.timeout)

	async def search(self, profile: MoodProfile) -> Any:
		resp = await self._client.get(
			self._url,
			params=profile.as_params(),
			headers={"X-Api-Key": self._api_key},
		)
		resp.raise_for_status()
		return resp.json()

	async def aclose(self) -> None:
		await self._client.aclose()


async def get_exercise_client(
	config: AggregatorConfig = Depends(get_aggregator_config),
	http: httpx.AsyncClient = Depends(get_http_client),
) -> ExerciseClient:
	return ExerciseClient(config, client=http)
