"""
Input validation for goal plans.

Form values arrive as strings (empty when a field is left blank), JSON
values may be null. Both are normalised through GoalPlanInput and then
checked by validate_plan before any calendar is computed.
"""
from datetime import date
from typing import Optional

import pydantic
from pydantic import BaseModel, Field, field_validator

from goal.domain.GoalPlan import GoalPlan
from goal.utilities.config import MAX_GOAL_DAYS
from goal.utilities.constants import (
    MISSING_FIELDS_MESSAGE, END_BEFORE_START_MESSAGE, RANGE_TOO_LONG_MESSAGE
)


class ValidationError(ValueError):
    """Rejected user input. The message is meant to be shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GoalPlanInput(BaseModel):
    """Schema for the goal form / JSON body."""
    name: str = Field(default="")
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; treat null as empty."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """An untouched date picker posts an empty string."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_plan(self) -> GoalPlan:
        return GoalPlan(name=self.name, start_date=self.start_date, end_date=self.end_date)


def validate_plan(plan: GoalPlan) -> GoalPlan:
    '''Checks that the plan can be turned into a calendar; raises ValidationError otherwise.'''
    if not plan.name or not plan.name.strip() or plan.start_date is None or plan.end_date is None:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if plan.end_date < plan.start_date:
        raise ValidationError(END_BEFORE_START_MESSAGE)
    if (plan.end_date - plan.start_date).days + 1 > MAX_GOAL_DAYS:
        raise ValidationError(RANGE_TOO_LONG_MESSAGE.format(max_days=MAX_GOAL_DAYS))
    return plan


def parse_goal_input(data: dict) -> GoalPlan:
    """Build a validated GoalPlan from raw form/JSON values.

    Malformed values (e.g. an unparseable date) are reported the same way as
    missing ones.
    """
    try:
        parsed = GoalPlanInput(**data)
    except pydantic.ValidationError as e:
        raise ValidationError(MISSING_FIELDS_MESSAGE) from e
    return validate_plan(parsed.to_plan())


__all__ = ['ValidationError', 'GoalPlanInput', 'validate_plan', 'parse_goal_input']
