from .gather import gather_all
from .race import race, raceM

__all__ = (
    # Gather
    "gather_all",
    # Race
    "race",
    "raceM",
)
