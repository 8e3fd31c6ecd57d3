from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..moods import AggregatorConfig, get_aggregator_config


async def get_http_client(config: AggregatorConfig = Depends(get_aggregator_config)) -> AsyncIterator[httpx.AsyncClient]:
	# One client per request, shared by both upstream calls
	async with httpx.AsyncClient(timeout=config.timeout) as client:
		yield client
