"""Error taxonomy shared by the repository, services and adapters."""


class SuperheroesError(Exception):
    """Base exception for all superheroes errors."""


class DataLoadError(SuperheroesError):
    """Raised when the hero dataset is missing, unreadable or malformed."""


class HeroNotFoundError(SuperheroesError):
    """Raised when an identifier does not resolve to a hero."""

    def __init__(self, message: str = "Superhero not found"):
        super().__init__(message)


class InvalidArgumentError(SuperheroesError):
    """Raised when a request violates an input constraint."""
