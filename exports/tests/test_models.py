from django.test import TestCase

from accounts.models import User
from exports.models import ExportRecord, InvalidTransition


class ExportRecordStateTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="exporter", email="e@example.com", password="s3cret-pass")
        self.record = ExportRecord.objects.create(user=self.user, kind=ExportRecord.Kind.PDF)

    def test_starts_idle(self) -> None:
        self.assertEqual(self.record.status, ExportRecord.Status.IDLE)

    def test_successful_path(self) -> None:
        self.record.start()
        self.assertEqual(self.record.status, ExportRecord.Status.RENDERING)
        self.assertIsNotNone(self.record.started_at)

        self.record.finish(1234)
        self.record.refresh_from_db()
        self.assertEqual(self.record.status, ExportRecord.Status.DONE)
        self.assertEqual(self.record.byte_size, 1234)
        self.assertIsNotNone(self.record.completed_at)

    def test_failure_path(self) -> None:
        self.record.start()
        self.record.fail("Timeout")
        self.record.refresh_from_db()
        self.assertEqual(self.record.status, ExportRecord.Status.FAILED)
        self.assertEqual(self.record.error_message, "Timeout")

    def test_illegal_transitions(self) -> None:
        with self.assertRaises(InvalidTransition):
            self.record.finish(10)

        self.record.start()
        with self.assertRaises(InvalidTransition):
            self.record.start()

        self.record.finish(10)
        with self.assertRaises(InvalidTransition):
            self.record.fail("late")
