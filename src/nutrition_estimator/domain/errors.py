"""Domain errors surfaced by the HTTP layer."""


class NutritionEstimatorError(Exception):
    """Base error with the HTTP status it maps to."""

    status_code: int = 500


class MissingParameterError(NutritionEstimatorError):
    """The caller omitted the food description."""

    status_code = 400


class UpstreamUnavailableError(NutritionEstimatorError):
    """The text generation service failed or returned a non-success status."""


class UpstreamTimeoutError(UpstreamUnavailableError):
    """The text generation service did not answer in time."""


class UpstreamMalformedError(NutritionEstimatorError):
    """The text generation service answered with something that isn't JSON."""


class InvalidFoodError(NutritionEstimatorError):
    """The text generation service flagged the input as not being food."""
