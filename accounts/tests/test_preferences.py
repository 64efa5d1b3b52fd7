from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User, UserPreferences
from accounts.themes import banner_colors, palette_colors, resolve_banner_color, resolve_palette


class ThemeCatalogueTests(SimpleTestCase):
    def test_unknown_names_fall_back_to_defaults(self) -> None:
        self.assertEqual(resolve_palette("neonRainbow"), "darkGreen")
        self.assertEqual(resolve_palette(None), "darkGreen")
        self.assertEqual(resolve_banner_color("plaid"), "midnightSlate")

    def test_known_names_resolve_to_colors(self) -> None:
        self.assertEqual(palette_colors("deepBlue")["accent"], "#3b82f6")
        self.assertEqual(banner_colors("pureWhite"), {"bg": "#ffffff", "text": "#000000"})


class PreferencesViewTests(TestCase):
    """GET/PATCH of the palette preference record."""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="painter", email="p@example.com", password="s3cret-pass")
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_get_creates_record_with_defaults(self) -> None:
        response = self.client.get(reverse("user-preferences"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"palette": "darkGreen", "banner_color": "midnightSlate"})
        self.assertTrue(UserPreferences.objects.filter(user=self.user).exists())

    def test_patch_then_fresh_load_returns_new_palette(self) -> None:
        response = self.client.patch(
            reverse("user-preferences"),
            {"palette": "hotPink", "banner_color": "onyx"},
            format="json",
        )
        self.assertEqual(response.status_code, 200)

        fresh = APIClient()
        fresh.force_authenticate(User.objects.get(pk=self.user.pk))
        reloaded = fresh.get(reverse("user-preferences"))

        self.assertEqual(reloaded.data["palette"], "hotPink")
        self.assertEqual(reloaded.data["banner_color"], "onyx")

    def test_patch_rejects_unknown_palette(self) -> None:
        response = self.client.patch(
            reverse("user-preferences"),
            {"palette": "neonRainbow"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("palette", response.data)
        self.assertEqual(UserPreferences.for_user(self.user).palette, "darkGreen")

    def test_put_is_not_allowed(self) -> None:
        response = self.client.put(
            reverse("user-preferences"),
            {"palette": "teal", "banner_color": "onyx"},
            format="json",
        )
        self.assertEqual(response.status_code, 405)

    def test_full_preferences_patch(self) -> None:
        response = self.client.patch(
            reverse("user-preferences-full"),
            {"language": "pt-br", "profile_visibility": "public", "show_email": True},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        preferences = UserPreferences.for_user(self.user)
        self.assertEqual(preferences.language, "pt-br")
        self.assertTrue(preferences.is_public)
        self.assertTrue(preferences.show_email)

    def test_requires_authentication(self) -> None:
        response = APIClient().get(reverse("user-preferences"))
        self.assertIn(response.status_code, (401, 403))
