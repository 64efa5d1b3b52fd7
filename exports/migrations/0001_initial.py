import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('resumes', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ExportRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kind', models.CharField(choices=[('pdf', 'PDF'), ('docx', 'DOCX'), ('png', 'PNG banner')], max_length=8)),
                ('template', models.CharField(blank=True, max_length=20)),
                ('palette', models.CharField(blank=True, max_length=32)),
                ('banner_color', models.CharField(blank=True, max_length=32)),
                ('language', models.CharField(blank=True, max_length=8)),
                ('status', models.CharField(choices=[('IDLE', 'Idle'), ('RENDERING', 'Rendering'), ('DONE', 'Done'), ('FAILED', 'Failed')], default='IDLE', max_length=20)),
                ('byte_size', models.PositiveIntegerField(default=0)),
                ('error_message', models.TextField(blank=True)),
                ('started_at', models.DateTimeField(blank=True, null=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('resume', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='exports', to='resumes.resume')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='exports', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Export Record',
                'verbose_name_plural': 'Export Records',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['status', 'created_at'], name='export_status_created_idx')],
            },
        ),
    ]
