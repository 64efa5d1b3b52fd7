import uuid

from django.test import TestCase

from accounts.models import User
from resumes.models import Experience, Resume, Skill
from resumes.serializers import ResumeSnapshotSerializer
from resumes.services import ResumeRepository, SnapshotError


def _validated(data: dict) -> dict:
    serializer = ResumeSnapshotSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class ApplySnapshotTests(TestCase):
    """Reconciliation of submitted snapshots with stored section rows."""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="writer", email="w@example.com", password="s3cret-pass")
        self.snapshot = {
            "title": "Main",
            "template": "classic",
            "header": {"full_name": "Wanda Writer", "headline": "Backend Engineer", "email": "w@example.com"},
            "profile": {"bio": "Builds APIs.", "location": "Lisbon"},
            "interests": ["climbing", "chess"],
            "experiences": [
                {"client_id": str(uuid.uuid4()), "company": "Acme", "role": "Engineer", "start_date": "2021-03", "is_current": True},
                {"client_id": str(uuid.uuid4()), "company": "Initech", "role": "Intern", "start_date": "2019-06", "end_date": "2020-01"},
            ],
            "skills": [
                {"client_id": str(uuid.uuid4()), "category": "Languages", "name": "Python"},
                {"client_id": str(uuid.uuid4()), "category": "Languages", "name": "Go"},
                {"client_id": str(uuid.uuid4()), "category": "Tools", "name": "Docker"},
            ],
        }

    def test_creates_resume_with_ordered_sections(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))

        self.assertEqual(resume.user, self.user)
        self.assertEqual(resume.template, "classic")
        self.assertEqual(resume.full_name, "Wanda Writer")
        self.assertEqual(resume.location, "Lisbon")
        self.assertEqual(resume.interests, ["climbing", "chess"])
        self.assertEqual([skill.name for skill in resume.skills.all()], ["Python", "Go", "Docker"])
        self.assertEqual([skill.order for skill in resume.skills.all()], [0, 1, 2])
        self.assertEqual(resume.experiences.count(), 2)

    def test_reapplying_same_snapshot_changes_nothing(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        stored = list(Skill.objects.filter(resume=resume).values("id", "client_id", "name", "order"))

        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot), resume=resume)

        self.assertEqual(Resume.objects.filter(user=self.user).count(), 1)
        self.assertEqual(
            list(Skill.objects.filter(resume=resume).values("id", "client_id", "name", "order")),
            stored,
        )

    def test_items_matched_by_id_are_updated_and_missing_rows_deleted(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        python, go, docker = list(resume.skills.all())

        updated = dict(self.snapshot)
        updated["skills"] = [
            {"id": docker.pk, "category": "Tools", "name": "Docker"},
            {"id": python.pk, "category": "Languages", "name": "Python 3"},
            {"category": "Languages", "name": "Rust"},
        ]
        resume = ResumeRepository.apply_snapshot(self.user, _validated(updated), resume=resume)

        skills = list(resume.skills.all())
        self.assertEqual([skill.name for skill in skills], ["Docker", "Python 3", "Rust"])
        self.assertEqual(skills[0].pk, docker.pk)
        self.assertEqual(skills[1].pk, python.pk)
        self.assertFalse(Skill.objects.filter(pk=go.pk).exists())

    def test_items_matched_by_client_id(self) -> None:
        client_id = uuid.uuid4()
        data = dict(self.snapshot)
        data["skills"] = [{"client_id": str(client_id), "name": "Python"}]
        resume = ResumeRepository.apply_snapshot(self.user, _validated(data))
        stored = resume.skills.get()
        self.assertEqual(stored.client_id, client_id)

        data["skills"] = [{"client_id": str(client_id), "name": "Python 3.12"}]
        resume = ResumeRepository.apply_snapshot(self.user, _validated(data), resume=resume)

        self.assertEqual(resume.skills.get().pk, stored.pk)
        self.assertEqual(resume.skills.get().name, "Python 3.12")

    def test_reorder_survives_reload(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        a, b, c = [
            {"id": skill.pk, "client_id": str(skill.client_id), "category": skill.category, "name": skill.name}
            for skill in resume.skills.all()
        ]

        data = dict(self.snapshot)
        data["skills"] = [c, a, b]
        ResumeRepository.apply_snapshot(self.user, _validated(data), resume=resume)

        reloaded = ResumeRepository.list_for_user(self.user)[0]
        self.assertEqual([skill.name for skill in reloaded.skills.all()], ["Docker", "Python", "Go"])

    def test_foreign_item_id_is_rejected(self) -> None:
        other = User.objects.create_user(username="other", email="o@example.com", password="s3cret-pass")
        other_resume = ResumeRepository.apply_snapshot(other, _validated(self.snapshot))
        foreign = other_resume.skills.first()

        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        data = dict(self.snapshot)
        data["skills"] = [{"id": foreign.pk, "name": "Stolen"}]

        with self.assertRaises(SnapshotError):
            ResumeRepository.apply_snapshot(self.user, _validated(data), resume=resume)

        foreign.refresh_from_db()
        self.assertEqual(foreign.name, "Python")
        self.assertEqual(resume.skills.count(), 3)

    def test_missing_header_clears_header_fields(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        data = dict(self.snapshot)
        data.pop("header")

        resume = ResumeRepository.apply_snapshot(self.user, _validated(data), resume=resume)

        self.assertEqual(resume.full_name, "")
        self.assertEqual(resume.headline, "")

    def test_chronological_ordering(self) -> None:
        data = dict(self.snapshot)
        data["experiences"] = [
            {"company": "Old", "role": "Intern", "start_date": "2015-01", "end_date": "2016-01"},
            {"company": "Current", "role": "Lead", "start_date": "2020-01", "is_current": True},
            {"company": "Middle", "role": "Engineer", "start_date": "2017-05", "end_date": "2019-12"},
        ]
        ResumeRepository.apply_snapshot(self.user, _validated(data))

        by_order = ResumeRepository.list_for_user(self.user)[0]
        self.assertEqual(
            [exp.company for exp in by_order.experiences.all()],
            ["Old", "Current", "Middle"],
        )
        chronological = ResumeRepository.list_for_user(self.user, chronological=True)[0]
        self.assertEqual(
            [exp.company for exp in chronological.experiences.all()],
            ["Current", "Middle", "Old"],
        )

    def test_latest_for_user_without_resume(self) -> None:
        with self.assertRaises(Resume.DoesNotExist):
            ResumeRepository.latest_for_user(self.user)

    def test_deleting_resume_cascades_to_sections(self) -> None:
        resume = ResumeRepository.apply_snapshot(self.user, _validated(self.snapshot))
        resume.delete()
        self.assertFalse(Experience.objects.exists())
        self.assertFalse(Skill.objects.exists())


class SnapshotValidationTests(TestCase):
    def test_rejects_bad_month_format(self) -> None:
        serializer = ResumeSnapshotSerializer(data={
            "experiences": [{"company": "Acme", "role": "Dev", "start_date": "03/2021"}],
        })
        self.assertFalse(serializer.is_valid())
        self.assertIn("experiences", serializer.errors)

    def test_rejects_current_job_with_end_date(self) -> None:
        serializer = ResumeSnapshotSerializer(data={
            "experiences": [
                {"company": "Acme", "role": "Dev", "start_date": "2021-03", "end_date": "2022-01", "is_current": True},
            ],
        })
        self.assertFalse(serializer.is_valid())

    def test_rejects_duplicate_client_ids(self) -> None:
        client_id = str(uuid.uuid4())
        serializer = ResumeSnapshotSerializer(data={
            "skills": [{"client_id": client_id, "name": "A"}, {"client_id": client_id, "name": "B"}],
        })
        self.assertFalse(serializer.is_valid())
        self.assertIn("skills", serializer.errors)

    def test_rejects_unknown_template(self) -> None:
        serializer = ResumeSnapshotSerializer(data={"template": "baroque"})
        self.assertFalse(serializer.is_valid())
        self.assertIn("template", serializer.errors)
