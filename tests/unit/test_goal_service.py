"""Tests for GoalService."""
import pytest
from pydantic import ValidationError


@pytest.fixture
def store():
    """Goal store seeded with the default goals."""
    from app.store import GoalStore

    goal_store = GoalStore()
    goal_store.open(seed=True)
    return goal_store


class TestGoalStore:
    """Tests for the goal store."""

    def test_open_seeds_defaults(self, store):
        """Test seeding and the id counter."""
        assert [goal.id for goal in store.goals] == [1, 2, 3]
        assert store.goals[0].label_color == "text-blue-500"
        assert store.next_id == 4

    def test_open_without_seed(self):
        """Test an empty store starts counting at 1."""
        from app.store import GoalStore

        store = GoalStore()
        store.open(seed=False)

        assert store.goals == []
        assert store.take_id() == 1
        assert store.take_id() == 2


class TestGoalServiceAdd:
    """Tests for adding goals."""

    def test_add_default_goal(self, store):
        """Test the default record."""
        from app.services.goal_service import GoalService

        service = GoalService(store)
        goal = service.add_goal()

        assert goal.id == 4
        assert goal.name == "New KPI"
        assert goal.target == 0
        assert goal.current == 0
        assert goal.color == "bg-gray-500"
        assert goal.label_color == "text-gray-500"
        assert service.list_goals()[-1] == goal

    def test_add_with_overrides(self, store):
        """Test creation overrides and color normalization."""
        from app.services.goal_service import GoalService
        from app.models.goal import GoalCreate

        service = GoalService(store)
        goal = service.add_goal(GoalCreate(name="Calls", target=200, color="#ff8800"))

        assert goal.name == "Calls"
        assert goal.target == 200
        assert goal.color == "bg-[#ff8800]"
        assert goal.label_color == "text-[#ff8800]"

    def test_ids_not_reused_after_reordering(self, store):
        """Test ids come from the counter, not the last goal in the list."""
        from app.services.goal_service import GoalService

        service = GoalService(store)
        store.goals.reverse()

        first = service.add_goal()
        second = service.add_goal()

        assert first.id == 4
        assert second.id == 5


class TestGoalServiceAdjust:
    """Tests for adjusting progress."""

    def test_adjust_up_and_down(self, store):
        """Test relative changes."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        assert service.adjust(1, 1).current == 21
        assert service.adjust(1, -5).current == 16

    def test_adjust_clamps_at_zero(self, store):
        """Test decrements below zero clamp to zero."""
        from app.services.goal_service import GoalService

        service = GoalService(store)
        service.set_current(3, 3)

        goal = service.adjust(3, -100)

        assert goal.current == 0
        assert service.get_goal(3).current == 0

    def test_adjust_does_not_mutate_previous_snapshot(self, store):
        """Test goals read before a mutation keep their values."""
        from app.services.goal_service import GoalService

        service = GoalService(store)
        before = service.list_goals()

        service.adjust(1, 10)

        assert before[0].current == 20
        assert service.get_goal(1).current == 30

    def test_adjust_unknown_goal(self, store):
        """Test unknown ids raise GoalNotFoundError."""
        from app.services.goal_service import GoalService
        from app.exceptions import GoalNotFoundError

        service = GoalService(store)

        with pytest.raises(GoalNotFoundError, match="Goal not found"):
            service.adjust(99, 1)

    def test_set_current(self, store):
        """Test absolute progress entry."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        assert service.set_current(2, 500).current == 500


class TestGoalServiceSetField:
    """Tests for set_field and update_goal."""

    def test_set_name(self, store):
        """Test renaming a goal."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        assert service.set_field(1, "name", "Meetings").name == "Meetings"

    def test_set_target_zero(self, store):
        """Test a zero target is accepted."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        assert service.set_field(1, "target", 0).target == 0

    def test_set_color_refreshes_label(self, store):
        """Test label color follows the background color."""
        from app.services.goal_service import GoalService

        service = GoalService(store)
        goal = service.set_field(1, "color", "#123abc")

        assert goal.color == "bg-[#123abc]"
        assert goal.label_color == "text-[#123abc]"

    def test_set_non_numeric_target(self, store):
        """Test invalid values are rejected before the store changes."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        with pytest.raises(ValidationError):
            service.set_field(1, "target", "lots")
        assert service.get_goal(1).target == 50

    def test_set_negative_target(self, store):
        """Test negative targets are rejected."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        with pytest.raises(ValueError):
            service.set_field(1, "target", -10)

    def test_set_uneditable_field(self, store):
        """Test progress and id cannot be overwritten through set_field."""
        from app.services.goal_service import GoalService

        service = GoalService(store)

        with pytest.raises(ValueError, match="cannot be edited"):
            service.set_field(1, "current", 5)
        with pytest.raises(ValueError, match="cannot be edited"):
            service.set_field(1, "id", 7)

    def test_set_field_unknown_goal(self, store):
        """Test unknown ids raise GoalNotFoundError."""
        from app.services.goal_service import GoalService
        from app.exceptions import GoalNotFoundError

        service = GoalService(store)

        with pytest.raises(GoalNotFoundError):
            service.set_field(42, "name", "Ghost")

    def test_update_goal(self, store):
        """Test applying several fields at once."""
        from app.services.goal_service import GoalService
        from app.models.goal import GoalUpdate

        service = GoalService(store)
        goal = service.update_goal(2, GoalUpdate(name="Profit", target=1200, color="bg-red-500"))

        assert goal.name == "Profit"
        assert goal.target == 1200
        assert goal.current == 350
        assert goal.label_color == "text-red-500"

    def test_update_goal_empty(self, store):
        """Test an empty update returns the goal unchanged."""
        from app.services.goal_service import GoalService
        from app.models.goal import GoalUpdate

        service = GoalService(store)

        assert service.update_goal(3, GoalUpdate()) == service.get_goal(3)
