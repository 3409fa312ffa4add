import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Clinic",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("cnpj", models.CharField(blank=True, max_length=18, null=True)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("phone", models.CharField(blank=True, max_length=20, null=True)),
                ("whatsapp_number", models.CharField(blank=True, max_length=20, null=True)),
                ("address", models.CharField(blank=True, max_length=255, null=True)),
                ("city", models.CharField(blank=True, max_length=100, null=True)),
                ("state", models.CharField(blank=True, max_length=2, null=True)),
                ("zip_code", models.CharField(blank=True, max_length=9, null=True)),
                ("logo", models.CharField(blank=True, max_length=500, null=True)),
                ("email_signature", models.TextField(blank=True, null=True)),
                ("whatsapp_template", models.TextField()),
                ("email_template", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "clinics",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("clinic_id", models.UUIDField(blank=True, db_index=True, null=True)),
                ("name", models.CharField(max_length=255)),
                ("cpf", models.CharField(blank=True, max_length=14, null=True)),
                ("phone", models.CharField(blank=True, max_length=20, null=True)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("exam_type", models.CharField(max_length=100)),
                ("last_exam_date", models.DateField()),
                ("next_checkup_date", models.DateField(blank=True, null=True)),
                (
                    "risk_profile",
                    models.CharField(
                        choices=[("alto", "Alto"), ("moderado", "Moderado"), ("baixo", "Baixo")],
                        default="baixo",
                        max_length=10,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("ativo", "Ativo"), ("inativo", "Inativo")],
                        db_index=True,
                        default="ativo",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "patients",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["status", "next_checkup_date"], name="patient_status_checkup_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Alert",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("patient_id", models.UUIDField(db_index=True)),
                ("patient_name", models.CharField(max_length=255)),
                ("clinic_id", models.UUIDField(blank=True, db_index=True, null=True)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("checkup_reminder", "Lembrete de check-up"),
                            ("overdue", "Em atraso"),
                            ("urgent", "Urgente"),
                        ],
                        max_length=20,
                    ),
                ),
                ("message", models.TextField()),
                ("scheduled_for", models.DateTimeField()),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pendente"), ("sent", "Enviado"), ("failed", "Falhou")],
                        db_index=True,
                        default="pending",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "alerts",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status", "pending")),
                        fields=("patient_id",),
                        name="uniq_pending_alert_per_patient",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("patient_id", models.UUIDField(db_index=True)),
                ("patient_name", models.CharField(max_length=255)),
                ("clinic_id", models.UUIDField(blank=True, db_index=True, null=True)),
                ("type", models.CharField(choices=[("email", "E-mail"), ("whatsapp", "WhatsApp")], max_length=10)),
                ("content", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("enviado", "Enviado"), ("entregue", "Entregue"), ("lido", "Lido"), ("erro", "Erro")],
                        default="enviado",
                        max_length=10,
                    ),
                ),
                ("sent_at", models.DateTimeField()),
                ("scheduled_for", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "messages",
                "ordering": ["-sent_at"],
            },
        ),
    ]
