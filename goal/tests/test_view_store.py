from datetime import date
import unittest
from goal.domain.GoalPlan import GoalPlan
from goal.domain.ViewState import EditingState, ViewingState, EDITING, VIEWING
from goal.infra.view_store import ViewStore
from goal.utilities.validators import ValidationError

FORM = {"name": "Learn Piano", "start_date": "2024-01-01", "end_date": "2024-01-10"}


class TestViewStore(unittest.TestCase):

    def setUp(self):
        self.store = ViewStore()

    def test_starts_editing_with_empty_draft(self):
        state = self.store.current()
        self.assertIsInstance(state, EditingState)
        self.assertEqual(state.mode, EDITING)
        self.assertEqual(state.draft, GoalPlan(""))

    def test_generate_switches_to_viewing(self):
        state = self.store.generate(FORM, today=date(2024, 1, 5))
        self.assertIsInstance(state, ViewingState)
        self.assertEqual(state.mode, VIEWING)
        self.assertIs(self.store.current(), state)
        self.assertEqual(state.report.total_days, 10)
        self.assertEqual(state.report.days_remaining, 5)

    def test_invalid_input_leaves_state_unchanged(self):
        viewing = self.store.generate(FORM)
        with self.assertRaises(ValidationError):
            self.store.generate(dict(FORM, end_date="2023-12-31"))
        self.assertIs(self.store.current(), viewing)

        self.store.reset()
        editing = self.store.current()
        with self.assertRaises(ValidationError):
            self.store.generate(dict(FORM, name=""))
        self.assertIs(self.store.current(), editing)

    def test_back_keeps_form_values(self):
        self.store.generate(FORM)
        state = self.store.back()
        self.assertIsInstance(state, EditingState)
        self.assertEqual(state.draft, GoalPlan("Learn Piano", date(2024, 1, 1), date(2024, 1, 10)))

    def test_back_while_editing_is_noop(self):
        before = self.store.current()
        after = self.store.back()
        self.assertEqual(before, after)

    def test_generate_recomputes_from_scratch(self):
        self.store.generate(FORM)
        second = self.store.generate(dict(FORM, end_date="2024-02-10"))
        self.assertEqual(second.report.total_days, 41)
        self.assertEqual(len(second.report.months), 2)


if __name__ == '__main__':
    unittest.main()
