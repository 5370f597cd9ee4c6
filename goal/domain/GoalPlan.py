"""GoalPlan domain entity: the user's goal name and inclusive date range."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class GoalPlan:
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def to_dict(self):
        '''Converts the plan to a JSON-friendly dictionary (ISO dates).'''
        return {
            "name": self.name,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
        }

    def __str__(self) -> str:
        return f"{self.name}: {self.start_date} -> {self.end_date}"
