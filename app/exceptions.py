"""Domain exceptions."""


class InvalidRangeError(ValueError):
    """Raised when a date range starts after it ends."""


class GoalNotFoundError(ValueError):
    """Raised when no goal exists for the requested id."""

    def __init__(self, goal_id: int):
        super().__init__("Goal not found")
        self.goal_id = goal_id
