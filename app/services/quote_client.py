from __future__ import annotations

from typing import Any

import httpx
from fastapi import Depends

from ..moods import AggregatorConfig, get_aggregator_config
from .http_client import get_http_client


class QuoteClient:
	"""ZenQuotes ``/api/random``; returns the decoded payload untouched."""

	def __init__(self, config: AggregatorConfig, client: httpx.AsyncClient | None = None) -> None:
		self._url = config.quote_url
		self._client = client or httpx.AsyncClient(timeout=config.timeout)

	async def random_quote(self) -> Any:
		resp = await self._client.get(self._url)
		resp.raise_for_status()
		return resp.json()

	async def aclose(self) -> None:
		await self._client.aclose()


async def get_quote_client(
	config: AggregatorConfig = Depends(get_aggregator_config),
	http: httpx.AsyncClient = Depends(get_http_client),
) -> QuoteClient:
	return QuoteClient(config, client=http)
