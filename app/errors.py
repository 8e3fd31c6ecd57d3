from __future__ import annotations


class RecommendationError(Exception):
	"""Base for failures that map to a JSON ``{"error": ...}`` response."""

	status_code: int = 500
	message: str = "Unexpected error. Please try again."

	def __init__(self, message: str | None = None) -> None:
		if message is not None:
			self.message = message
		super().__init__(self.message)


class InvalidMoodError(RecommendationError):
	status_code = 400
	message = "Unknown mood. Please choose one of the provided moods."


class ConfigurationError(RecommendationError):
	status_code = 500
	message = "Server is missing API_NINJAS_KEY configuration."


class UpstreamError(RecommendationError):
	status_code = 500
	message = "Something went wrong talking to the external APIs. Please try again in a moment."


class NoResultsError(RecommendationError):
	status_code = 502
	message = "No exercises found for this mood. Try another mood or adjust the mapping."
