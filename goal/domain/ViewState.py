"""View state of the goal tracker page: either editing the form or viewing a report.

Each variant carries exactly the data it needs, so "viewing without a
report" cannot be represented.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

from goal.domain.CalendarReport import CalendarReport
from goal.domain.GoalPlan import GoalPlan

EDITING = "editing"
VIEWING = "viewing"


@dataclass(frozen=True)
class EditingState:
    draft: GoalPlan = field(default_factory=lambda: GoalPlan(name=""))
    mode: str = field(default=EDITING, init=False)


@dataclass(frozen=True)
class ViewingState:
    report: CalendarReport
    mode: str = field(default=VIEWING, init=False)

    @property
    def draft(self) -> GoalPlan:
        """Form values to restore when going back to editing."""
        return self.report.plan


ViewState = Union[EditingState, ViewingState]

__all__ = ['EDITING', 'VIEWING', 'EditingState', 'ViewingState', 'ViewState']
