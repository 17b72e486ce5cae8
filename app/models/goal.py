"""Goal (KPI) model definitions."""
from typing import Optional

from pydantic import BaseModel, Field

from app.utils.colors import DEFAULT_COLOR


class GoalBase(BaseModel):
    """Base goal fields."""

    name: str
    target: float = Field(ge=0)
    color: str = DEFAULT_COLOR


class GoalCreate(BaseModel):
    """Goal creation model - overrides for the default record."""

    name: str = "New KPI"
    target: float = Field(0, ge=0)
    current: float = Field(0, ge=0)
    color: str = DEFAULT_COLOR


class GoalUpdate(BaseModel):
    """Goal update model - all fields optional."""

    name: Optional[str] = None
    target: Optional[float] = Field(None, ge=0)
    color: Optional[str] = None


class GoalAdjust(BaseModel):
    """Relative change to a goal's progress."""

    delta: float


class GoalCurrent(BaseModel):
    """Absolute progress entry."""

    current: float = Field(ge=0)


class Goal(GoalBase):
    """Full goal model as held by the goal store."""

    id: int
    current: float = Field(0, ge=0)
    label_color: str = "text-gray-500"
