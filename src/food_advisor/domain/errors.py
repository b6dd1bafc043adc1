"""Error types raised across the food advisor."""


class FoodAdvisorError(Exception):
    """Base error for the application."""


class FoodNotFoundError(FoodAdvisorError):
    """Raised when a food is absent from every data source."""

    def __init__(self, food_name: str) -> None:
        super().__init__(f'"{food_name}" is not in our database.')
        self.food_name = food_name


class UpstreamUnavailableError(FoodAdvisorError):
    """Raised by adapters when a remote service call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_retryable(self) -> bool:
        """Server errors and transport failures may succeed on a retry."""
        return self.status_code is None or self.status_code >= 500


class InvalidImageError(FoodAdvisorError):
    """Raised when an uploaded image cannot be decoded."""


class NoFoodDetectedError(FoodAdvisorError):
    """Raised when the vision service returns no predictions."""
