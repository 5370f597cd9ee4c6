import unittest
from fastapi.testclient import TestClient
from goal.api.api_run import app
from goal.domain.ViewState import EditingState, ViewingState
from goal.infra.view_store import GLOBAL_VIEW_STORE

FORM = {"goal_name": "Learn Piano", "start_date": "2024-01-01", "end_date": "2024-01-10"}


class TestGoalTrackerPages(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        GLOBAL_VIEW_STORE.reset()

    def test_form_page(self):
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertIn('Generate Calendar', resp.text)
        self.assertIn('name="goal_name"', resp.text)

    def test_generate_redirects_to_calendar(self):
        resp = self.client.post('/generate', data=FORM, follow_redirects=False)
        self.assertEqual(resp.status_code, 303)
        self.assertIsInstance(GLOBAL_VIEW_STORE.current(), ViewingState)

        page = self.client.get('/')
        self.assertEqual(page.status_code, 200)
        self.assertIn('TARGET: Learn Piano', page.text)
        self.assertIn('January 1, 2024', page.text)
        self.assertIn('10 DAYS', page.text)
        self.assertEqual(page.text.count('class="calendar-day active"'), 10)
        self.assertEqual(page.text.count('class="month-calendar"'), 1)

    def test_invalid_input_shows_alert_and_keeps_state(self):
        resp = self.client.post('/generate', data=dict(FORM, end_date="2023-12-01"))
        self.assertEqual(resp.status_code, 400)
        self.assertIn('End date must be after start date', resp.text)
        self.assertIsInstance(GLOBAL_VIEW_STORE.current(), EditingState)

        resp = self.client.post('/generate', data=dict(FORM, goal_name=""))
        self.assertEqual(resp.status_code, 400)
        self.assertIn('Please fill in all fields', resp.text)

    def test_huge_range_is_rejected(self):
        resp = self.client.post('/generate', data=dict(FORM, start_date="0001-01-01", end_date="9999-12-31"))
        self.assertEqual(resp.status_code, 400)
        self.assertIn('Date range is too long', resp.text)
        self.assertIsInstance(GLOBAL_VIEW_STORE.current(), EditingState)

    def test_back_returns_to_prefilled_form(self):
        self.client.post('/generate', data=FORM)
        resp = self.client.post('/back', follow_redirects=False)
        self.assertEqual(resp.status_code, 303)
        page = self.client.get('/')
        self.assertIn('value="Learn Piano"', page.text)
        self.assertIn('value="2024-01-10"', page.text)

    def test_download_requires_report(self):
        resp = self.client.get('/download_pdf')
        self.assertEqual(resp.status_code, 404)

    def test_download_pdf(self):
        self.client.post('/generate', data=FORM)
        resp = self.client.get('/download_pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')
        self.assertIn("Learn%20Piano-tracker.pdf", resp.headers['content-disposition'])
        self.assertTrue(resp.content.startswith(b'%PDF'))


class TestReportAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_report_json(self):
        resp = self.client.post('/api/report', json={"name": "Holidays", "start_date": "2023-12-20", "end_date": "2024-01-05"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['total_days'], 17)
        self.assertEqual([m['month_name'] for m in data['months']], ['December', 'January'])
        first_jan = [c for c in data['months'][1]['cells'] if c][0]
        self.assertEqual(first_jan['sequence_index'], 13)

    def test_report_json_rejects_bad_range(self):
        resp = self.client.post('/api/report', json={"name": "x", "start_date": "2024-01-05", "end_date": "2024-01-01"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['detail'], 'End date must be after start date')

    def test_report_does_not_touch_page_state(self):
        GLOBAL_VIEW_STORE.reset()
        self.client.post('/api/report', json={"name": "x", "start_date": "2024-01-01", "end_date": "2024-01-02"})
        self.assertIsInstance(GLOBAL_VIEW_STORE.current(), EditingState)

    def test_report_pdf(self):
        resp = self.client.post('/api/report/pdf', json={"name": "", "start_date": "2024-01-01", "end_date": "2024-01-02"})
        # an empty name is rejected before export
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post('/api/report/pdf', json={"name": "Run", "start_date": "2024-01-01", "end_date": "2024-02-02"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("Run-tracker.pdf", resp.headers['content-disposition'])

    def test_health(self):
        self.assertEqual(self.client.get('/health').json(), {"status": "ok"})


if __name__ == '__main__':
    unittest.main()
