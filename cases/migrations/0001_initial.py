import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CasaCase',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('case_number', models.CharField(help_text='Court case number used by the organization', max_length=255)),
                ('transition_aged_youth', models.BooleanField(default=False, help_text='Youth aged 14 or older who is preparing to leave foster care')),
                ('court_report_submitted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('casa_org', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='casa_cases', to='organizations.casaorg')),
            ],
            options={
                'verbose_name': 'CASA Case',
                'verbose_name_plural': 'CASA Cases',
                'db_table': 'casa_cases',
                'ordering': ['case_number'],
            },
        ),
        migrations.AddConstraint(
            model_name='casacase',
            constraint=models.UniqueConstraint(fields=('casa_org', 'case_number'), name='unique_case_number_per_org'),
        ),
        migrations.CreateModel(
            name='CaseAssignment',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('casa_case', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='case_assignments', to='cases.casacase')),
                ('volunteer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='case_assignments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Case Assignment',
                'verbose_name_plural': 'Case Assignments',
                'db_table': 'case_assignments',
                'unique_together': {('casa_case', 'volunteer')},
            },
        ),
        migrations.AddField(
            model_name='casacase',
            name='volunteers',
            field=models.ManyToManyField(related_name='casa_cases', through='cases.CaseAssignment', to=settings.AUTH_USER_MODEL),
        ),
        migrations.CreateModel(
            name='CaseUpdate',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('update_type', models.CharField(choices=[('youth', 'Youth'), ('school', 'School'), ('social_worker', 'Social Worker'), ('therapist', 'Therapist'), ('attorney', 'Attorney'), ('bio_parent', 'Bio Parent'), ('foster_parent', 'Foster Parent'), ('other_family', 'Other Family'), ('supervisor', 'Supervisor'), ('court', 'Court'), ('other', 'Other')], max_length=20)),
                ('other_type_text', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('casa_case', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='case_updates', to='cases.casacase')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='case_updates', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Case Update',
                'verbose_name_plural': 'Case Updates',
                'db_table': 'case_updates',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['casa_case', '-created_at'], name='case_updates_case_idx')],
            },
        ),
    ]
