import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def _section_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('client_id', models.UUIDField(default=uuid.uuid4, editable=False)),
        ('order', models.PositiveIntegerField(default=0)),
    ]


def _resume_fk(related_name):
    return ('resume', models.ForeignKey(
        on_delete=django.db.models.deletion.CASCADE,
        related_name=related_name,
        to='resumes.resume',
    ))


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Resume',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(blank=True, max_length=255)),
                ('template', models.CharField(choices=[('classic', 'Classic'), ('modern', 'Modern'), ('creative', 'Creative')], default='modern', max_length=20)),
                ('full_name', models.CharField(blank=True, max_length=255)),
                ('headline', models.CharField(blank=True, max_length=255)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('bio', models.TextField(blank=True)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('phone', models.CharField(blank=True, max_length=32)),
                ('website', models.URLField(blank=True, max_length=2048)),
                ('linkedin', models.URLField(blank=True, max_length=2048)),
                ('github', models.URLField(blank=True, max_length=2048)),
                ('interests', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='resumes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Resume',
                'verbose_name_plural': 'Resumes',
                'ordering': ['-updated_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Experience',
            fields=_section_fields() + [
                ('company', models.CharField(max_length=255)),
                ('role', models.CharField(max_length=255)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('start_date', models.CharField(blank=True, max_length=7)),
                ('end_date', models.CharField(blank=True, max_length=7)),
                ('is_current', models.BooleanField(default=False)),
                ('description', models.TextField(blank=True)),
                ('technologies', models.JSONField(blank=True, default=list)),
                _resume_fk('experiences'),
            ],
            options={
                'verbose_name': 'Experience',
                'verbose_name_plural': 'Experiences',
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Education',
            fields=_section_fields() + [
                ('institution', models.CharField(max_length=255)),
                ('degree', models.CharField(blank=True, max_length=255)),
                ('field', models.CharField(blank=True, max_length=255)),
                ('start_date', models.CharField(blank=True, max_length=7)),
                ('end_date', models.CharField(blank=True, max_length=7)),
                ('description', models.TextField(blank=True)),
                _resume_fk('education'),
            ],
            options={
                'verbose_name': 'Education',
                'verbose_name_plural': 'Education',
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Skill',
            fields=_section_fields() + [
                ('category', models.CharField(blank=True, max_length=100)),
                ('name', models.CharField(max_length=100)),
                _resume_fk('skills'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Language',
            fields=_section_fields() + [
                ('name', models.CharField(max_length=100)),
                ('proficiency', models.CharField(blank=True, max_length=100)),
                _resume_fk('languages'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Project',
            fields=_section_fields() + [
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('technologies', models.JSONField(blank=True, default=list)),
                ('url', models.URLField(blank=True, max_length=2048)),
                ('start_date', models.CharField(blank=True, max_length=7)),
                ('end_date', models.CharField(blank=True, max_length=7)),
                _resume_fk('projects'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Certification',
            fields=_section_fields() + [
                ('name', models.CharField(max_length=255)),
                ('issuer', models.CharField(blank=True, max_length=255)),
                ('date', models.CharField(blank=True, max_length=7)),
                ('url', models.URLField(blank=True, max_length=2048)),
                _resume_fk('certifications'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Award',
            fields=_section_fields() + [
                ('title', models.CharField(max_length=255)),
                ('issuer', models.CharField(blank=True, max_length=255)),
                ('date', models.CharField(blank=True, max_length=7)),
                ('description', models.TextField(blank=True)),
                _resume_fk('awards'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Recommendation',
            fields=_section_fields() + [
                ('recommender_name', models.CharField(max_length=255)),
                ('relationship', models.CharField(blank=True, max_length=255)),
                ('text', models.TextField()),
                ('date', models.CharField(blank=True, max_length=7)),
                _resume_fk('recommendations'),
            ],
            options={
                'ordering': ['order', 'id'],
                'abstract': False,
            },
        ),
    ]
