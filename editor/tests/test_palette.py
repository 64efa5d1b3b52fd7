from django.test import SimpleTestCase

from editor.client import ResumeApiError
from editor.palette import PaletteSync, SyncResult, ThemeContext

from .fakes import FakeResumeApi


class ThemeContextTests(SimpleTestCase):
    def test_listeners_notified_only_on_change(self) -> None:
        theme = ThemeContext()
        seen = []
        unsubscribe = theme.subscribe(lambda ctx: seen.append((ctx.palette, ctx.banner_color)))

        self.assertFalse(theme.apply(palette="darkGreen"))
        self.assertTrue(theme.apply(palette="teal"))
        unsubscribe()
        theme.apply(banner_color="onyx")

        self.assertEqual(seen, [("teal", "midnightSlate")])


class PaletteSyncTests(SimpleTestCase):
    def setUp(self) -> None:
        self.api = FakeResumeApi()
        self.sync = PaletteSync(self.api)

    def test_mount_pulls_stored_preference(self) -> None:
        self.api.preferences = {"palette": "indigo", "banner_color": "graphite"}

        result = self.sync.mount()

        self.assertEqual(result, SyncResult(ok=True))
        self.assertEqual(self.sync.theme.palette, "indigo")
        self.assertEqual(self.sync.theme.banner_color, "graphite")

    def test_change_writes_through_and_converges(self) -> None:
        result = self.sync.change(palette="hotPink")

        self.assertTrue(result.ok)
        other_session = PaletteSync(self.api)
        other_session.mount()
        self.assertEqual(other_session.theme.palette, "hotPink")

    def test_failed_write_is_reported_without_rollback(self) -> None:
        self.api.fail_with = ResumeApiError("palette: not a valid choice", 400)

        with self.assertLogs("editor.palette", level="WARNING"):
            result = self.sync.change(palette="cyan")

        self.assertFalse(result.ok)
        self.assertEqual(result.error, "palette: not a valid choice")
        self.assertEqual(self.sync.theme.palette, "cyan")

    def test_failed_mount_keeps_current_theme(self) -> None:
        self.api.fail_with = ResumeApiError("Network error: timeout")

        with self.assertLogs("editor.palette", level="WARNING"):
            result = self.sync.mount()

        self.assertFalse(result.ok)
        self.assertEqual(self.sync.theme.palette, "darkGreen")
