import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User, UserPreferences
from resumes.models import Resume


class OnboardingViewTests(TestCase):
    """POST /api/onboarding/ and GET /api/onboarding/status/."""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="newbie", email="n@example.com", password="s3cret-pass")
        self.client = APIClient()
        self.client.force_authenticate(self.user)
        self.url = reverse("onboarding")
        self.payload = {
            "template": "classic",
            "palette": "teal",
            "header": {"full_name": "Nina Newbie", "email": "n@example.com"},
            "profile": {"bio": "Backend developer", "location": "Lisbon"},
            "experiences": [
                {
                    "client_id": str(uuid.uuid4()),
                    "company": "Acme",
                    "role": "Developer",
                    "start_date": "2022-01",
                    "is_current": True,
                },
            ],
            "education": [
                {
                    "client_id": str(uuid.uuid4()),
                    "institution": "Uni",
                    "degree": "BSc",
                    "start_date": "2018-09",
                    "end_date": "2021-06",
                },
            ],
            "skills": [{"client_id": str(uuid.uuid4()), "name": "Go", "category": "Languages"}],
            "languages": [{"client_id": str(uuid.uuid4()), "name": "Portuguese", "proficiency": "Native"}],
        }

    def test_status_before_onboarding(self) -> None:
        response = self.client.get(reverse("onboarding-status"))

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.data["has_completed_onboarding"])
        self.assertIsNone(response.data["onboarding_completed_at"])

    def test_complete_creates_resume_sets_palette_and_marks_user(self) -> None:
        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["success"])

        resume = Resume.objects.get(user=self.user)
        self.assertEqual(response.data["resume_id"], resume.pk)
        self.assertEqual(resume.full_name, "Nina Newbie")
        self.assertEqual(resume.template, "classic")
        self.assertEqual(resume.experiences.count(), 1)
        self.assertEqual(resume.education.count(), 1)
        self.assertEqual(list(resume.skills.values_list("name", flat=True)), ["Go"])
        self.assertEqual(list(resume.languages.values_list("name", flat=True)), ["Portuguese"])
        self.assertEqual(UserPreferences.for_user(self.user).palette, "teal")

        self.user.refresh_from_db()
        self.assertTrue(self.user.has_completed_onboarding)
        self.assertIsNotNone(self.user.onboarding_completed_at)

        status_response = self.client.get(reverse("onboarding-status"))
        self.assertTrue(status_response.data["has_completed_onboarding"])

    def test_repeating_onboarding_updates_the_same_resume(self) -> None:
        first = self.client.post(self.url, self.payload, format="json").data
        self.payload["header"]["full_name"] = "Nina N."
        second = self.client.post(self.url, self.payload, format="json").data

        self.assertEqual(first["resume_id"], second["resume_id"])
        self.assertEqual(Resume.objects.filter(user=self.user).count(), 1)
        self.assertEqual(Resume.objects.get(user=self.user).full_name, "Nina N.")
        self.assertEqual(Resume.objects.get(user=self.user).skills.count(), 1)

    def test_missing_name_is_rejected_and_nothing_changes(self) -> None:
        self.payload["header"] = {"email": "n@example.com"}

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("header", response.data)
        self.assertFalse(Resume.objects.exists())
        self.user.refresh_from_db()
        self.assertFalse(self.user.has_completed_onboarding)

    def test_unknown_palette_is_rejected(self) -> None:
        self.payload["palette"] = "neonPlaid"

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("palette", response.data)

    def test_invalid_item_rolls_back_everything(self) -> None:
        self.payload["skills"] = [{"id": 999999, "name": "Rust"}]

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(Resume.objects.exists())
        self.assertNotEqual(UserPreferences.for_user(self.user).palette, "teal")
        self.user.refresh_from_db()
        self.assertFalse(self.user.has_completed_onboarding)

    def test_requires_authentication(self) -> None:
        response = APIClient().post(self.url, self.payload, format="json")
        self.assertIn(response.status_code, (401, 403))
