"""Goal service - business logic for goal management."""
import logging
from typing import Any, Optional

from app.exceptions import GoalNotFoundError
from app.models.goal import Goal, GoalCreate, GoalUpdate
from app.store import GoalStore
from app.utils.colors import label_color_for, normalize_color

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "target", "color")


class GoalService:
    """Service for handling goal operations."""

    def __init__(self, store: GoalStore):
        """Initialize service with the goal store."""
        self.store = store

    def _index_of(self, goal_id: int) -> int:
        for index, goal in enumerate(self.store.goals):
            if goal.id == goal_id:
                return index
        raise GoalNotFoundError(goal_id)

    def _replace(self, goal_id: int, changes: dict) -> Goal:
        """
        Store an updated copy of a goal.

        Color changes also refresh the label color so readers never derive it.
        """
        index = self._index_of(goal_id)

        if "color" in changes:
            changes["color"] = normalize_color(changes["color"])
            changes["label_color"] = label_color_for(changes["color"])

        updated = self.store.goals[index].model_copy(update=changes)
        self.store.goals[index] = updated
        return updated

    def list_goals(self) -> list[Goal]:
        """
        List goals in display order.

        Returns:
            Copy of the goal list; later mutations do not affect it
        """
        return list(self.store.goals)

    def get_goal(self, goal_id: int) -> Goal:
        """
        Get a single goal by id.

        Raises:
            GoalNotFoundError: If goal not found
        """
        return self.store.goals[self._index_of(goal_id)]

    def add_goal(self, goal_create: Optional[GoalCreate] = None) -> Goal:
        """
        Create a goal from the default record.

        Args:
            goal_create: Optional overrides for the default record

        Returns:
            Created goal with a fresh id
        """
        if goal_create is None:
            goal_create = GoalCreate()

        color = normalize_color(goal_create.color)
        goal = Goal(
            id=self.store.take_id(),
            name=goal_create.name,
            target=goal_create.target,
            current=goal_create.current,
            color=color,
            label_color=label_color_for(color),
        )
        self.store.goals.append(goal)

        logger.info("Added goal %s (%s)", goal.id, goal.name)
        return goal

    def adjust(self, goal_id: int, delta: float) -> Goal:
        """
        Change a goal's progress by a relative amount.

        Progress never drops below zero.

        Args:
            goal_id: Goal id
            delta: Amount to add, negative to subtract

        Returns:
            Updated goal

        Raises:
            GoalNotFoundError: If goal not found
        """
        goal = self.get_goal(goal_id)
        current = max(0, goal.current + delta)

        logger.info("Adjusted goal %s by %s to %s", goal_id, delta, current)
        return self._replace(goal_id, {"current": current})

    def set_current(self, goal_id: int, value: float) -> Goal:
        """Record an absolute progress value."""
        goal = self.get_goal(goal_id)
        return self.adjust(goal_id, value - goal.current)

    def set_field(self, goal_id: int, field: str, value: Any) -> Goal:
        """
        Overwrite one editable field.

        Args:
            goal_id: Goal id
            field: One of name, target, color
            value: New value, validated like a GoalUpdate field

        Returns:
            Updated goal

        Raises:
            GoalNotFoundError: If goal not found
            ValueError: If the field is not editable or the value is invalid
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be edited")

        # Validate before touching the store
        validated = GoalUpdate(**{field: value})
        new_value = getattr(validated, field)
        if new_value is None:
            raise ValueError(f"Field '{field}' cannot be empty")

        self._index_of(goal_id)

        logger.info("Set %s of goal %s", field, goal_id)
        return self._replace(goal_id, {field: new_value})

    def update_goal(self, goal_id: int, goal_update: GoalUpdate) -> Goal:
        """
        Apply every provided field of an update.

        Raises:
            GoalNotFoundError: If goal not found
        """
        changes = goal_update.model_dump(exclude_none=True)
        if not changes:
            return self.get_goal(goal_id)

        logger.info("Updated goal %s fields %s", goal_id, sorted(changes))
        return self._replace(goal_id, changes)
