# src/solid_principles/dip.py
"""
Dependency Inversion Principle (DIP).

High-level modules should not depend on low-level modules; both should
depend on abstractions. ``RecommendationEngineV1`` builds a genre-based
engine itself and is tied to it. ``RecommendationEngineV2`` receives any
``RecommendationEngine`` at construction, so engines can be swapped
without touching it.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

GENRE_MESSAGE = "Generating recommendations based on user's preferred genres..."
RECENT_MESSAGE = "Generating recommendations based on recently added movies..."


class GenreBasedRecommendationEngineV1:
    def get_recommendations(self):
        print(GENRE_MESSAGE)


class RecentlyAddedRecommendationEngineV1:
    def get_recommendations(self):
        print(RECENT_MESSAGE)


class RecommendationEngineV1:
    """Constructs and calls a concrete engine directly."""

    def __init__(self):
        self.recommender = GenreBasedRecommendationEngineV1()

    def recommend(self):
        self.recommender.get_recommendations()


class RecommendationEngine(ABC):
    """Source of movie recommendations."""

    @abstractmethod
    def get_recommendations(self):
        pass


class GenreBasedRecommendationEngineV2(RecommendationEngine):
    def get_recommendations(self):
        print(GENRE_MESSAGE)


class RecentlyAddedRecommendationEngineV2(RecommendationEngine):
    def get_recommendations(self):
        print(RECENT_MESSAGE)


class RecommendationEngineV2:
    """Calls whichever ``RecommendationEngine`` it was given."""

    def __init__(self, recommender: RecommendationEngine):
        self._recommender = recommender

    def recommend(self):
        logger.info(f"Recommending with {type(self._recommender).__name__}")
        self._recommender.get_recommendations()


def main():
    """Run the DIP demonstration."""
    print("Dependency Inversion Principle (DIP) Example")

    engine_v1 = RecommendationEngineV1()
    engine_v1.recommend()
    engine_v2 = RecommendationEngineV2(GenreBasedRecommendationEngineV2())
    engine_v2.recommend()


if __name__ == "__main__":
    main()
