"""Browsing state over a generated plan."""

from dataclasses import dataclass

from keto_planner.domain.plan import DayPlan, KetoPlan


@dataclass
class ResultView:
    """Selected day and expanded meal for the results screen.

    The plan is only read; selecting or expanding never changes it.
    """

    plan: KetoPlan
    active_day: int = 1
    expanded_meal_index: int | None = None

    def select_day(self, day: int) -> None:
        """Switch to another day, collapsing any expanded meal."""
        if self.plan.get_day(day) is None:
            return
        self.active_day = day
        self.expanded_meal_index = None

    def toggle_meal(self, index: int) -> None:
        """Expand a meal, or collapse it if it is already expanded."""
        day_plan = self.active_day_plan()
        if day_plan is None or not 0 <= index < len(day_plan.meals):
            return
        if self.expanded_meal_index == index:
            self.expanded_meal_index = None
        else:
            self.expanded_meal_index = index

    def active_day_plan(self) -> DayPlan | None:
        return self.plan.get_day(self.active_day)
