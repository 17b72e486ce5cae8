"""In-memory goal store shared by the API."""
import logging

from app.config import settings
from app.models.goal import Goal
from app.utils.colors import label_color_for

logger = logging.getLogger(__name__)

DEFAULT_GOALS = [
    {"id": 1, "name": "Appointments", "target": 50, "current": 20, "color": "bg-blue-500"},
    {"id": 2, "name": "Gross profit (10k JPY)", "target": 1000, "current": 350, "color": "bg-green-500"},
    {"id": 3, "name": "Deals", "target": 30, "current": 12, "color": "bg-purple-500"},
]


class GoalStore:
    """Owned goal collection with a monotonic id counter."""

    def __init__(self):
        self.goals: list[Goal] = []
        self.next_id: int = 1

    def open(self, seed: bool = True) -> None:
        """Reset the store, optionally seeding the default goals."""
        self.goals = []
        if seed:
            self.goals = [
                Goal(**data, label_color=label_color_for(data["color"]))
                for data in DEFAULT_GOALS
            ]
        self.next_id = max((goal.id for goal in self.goals), default=0) + 1
        logger.info("Goal store opened with %d goals", len(self.goals))

    def close(self) -> None:
        """Drop all goals."""
        self.goals = []
        self.next_id = 1
        logger.info("Goal store closed")

    def take_id(self) -> int:
        """Hand out the next id; ids are never reused."""
        goal_id = self.next_id
        self.next_id += 1
        return goal_id


# Global goal store instance
goal_store = GoalStore()


def open_store() -> None:
    """Open the global store using configured seeding."""
    goal_store.open(seed=settings.seed_default_goals)


def get_goal_store() -> GoalStore:
    """Dependency to get the goal store."""
    return goal_store
