"""In-memory holder of the page's current view state.

There is a single goal tracker view per process (one user, nothing is
persisted). Transitions:
  editing --generate(valid input)--> viewing
  editing --generate(invalid)------> editing (unchanged, ValidationError raised)
  viewing --back-------------------> editing (form keeps the plan's values)

A Lock guards the state since FastAPI runs sync endpoints in a thread pool.
"""
from __future__ import annotations
import logging
from datetime import date
from threading import Lock
from typing import Optional

from goal.domain.ViewState import EditingState, ViewingState, ViewState
from goal.logic.planning.date_range import build_calendar_report
from goal.utilities.validators import parse_goal_input

logger = logging.getLogger(__name__)


class ViewStore:
    def __init__(self):
        self._lock = Lock()
        self._state: ViewState = EditingState()

    def current(self) -> ViewState:
        with self._lock:
            return self._state

    def generate(self, form: dict, today: Optional[date] = None) -> ViewingState:
        """Recompute the report from the form values and switch to viewing.

        On ValidationError the state is left exactly as it was.
        """
        plan = parse_goal_input(form)
        report = build_calendar_report(plan, today=today)
        new_state = ViewingState(report=report)
        with self._lock:
            self._state = new_state
        logger.info("Generated calendar for %r (%d days)", plan.name, report.total_days)
        return new_state

    def back(self) -> EditingState:
        with self._lock:
            self._state = EditingState(draft=self._state.draft)
            return self._state

    def reset(self) -> None:
        with self._lock:
            self._state = EditingState()


# A singleton-like instance used by the web layer
GLOBAL_VIEW_STORE = ViewStore()

__all__ = ['ViewStore', 'GLOBAL_VIEW_STORE']
