from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExerciseRecord(BaseModel):
	# Field aliases are the names the front-end reads.
	model_config = ConfigDict(populate_by_name=True)

	name: str | None = None
	category: str | None = Field(default=None, alias="type")
	target_muscle: str | None = Field(default=None, alias="muscle")
	difficulty_level: str | None = Field(default=None, alias="difficulty")
	equipment: str = Field(alias="equipments")
	instructions: str | None = None


class QuoteRecord(BaseModel):
	text: str
	author: str


class RecommendationResponse(BaseModel):
	mood: str
	exercise: ExerciseRecord
	quote: QuoteRecord


class MoodOption(BaseModel):
	mood: str
	type: str
	difficulty: str


class MoodListResponse(BaseModel):
	moods: list[MoodOption]


class ErrorResponse(BaseModel):
	error: str
