"""Domain business rules and constants."""

from typing import Final

# Business Rules - Core domain constraints
MAX_THEATER_NAME_LENGTH: Final = 100
