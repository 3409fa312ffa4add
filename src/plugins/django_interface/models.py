"""
Domínio → ORM do painel de check-ups.

⚑ Uma clínica corrente (settings + templates de mensagem)
⚑ `clinic_id` como chave de partição (multi-tenant), sem FK obrigatória
⚑ Um único alerta pendente por paciente (UK parcial)
"""

from __future__ import annotations

import uuid

from django.db import models
from django.db.models import Index, Q, UniqueConstraint
from django.utils import timezone


# ╭──────────────────────────────────────────────╮
# │ 1. Clínica                                  │
# ╰──────────────────────────────────────────────╯
class Clinic(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    cnpj = models.CharField(max_length=18, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    whatsapp_number = models.CharField(max_length=20, blank=True, null=True)
    address = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    state = models.CharField(max_length=2, blank=True, null=True)
    zip_code = models.CharField(max_length=9, blank=True, null=True)
    logo = models.CharField(max_length=500, blank=True, null=True)
    email_signature = models.TextField(blank=True, null=True)
    whatsapp_template = models.TextField()
    email_template = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "clinics"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


# ╭──────────────────────────────────────────────╮
# │ 2. Pacientes                                │
# ╰──────────────────────────────────────────────╯
class Patient(models.Model):
    class RiskProfile(models.TextChoices):
        HIGH = "alto", "Alto"
        MODERATE = "moderado", "Moderado"
        LOW = "baixo", "Baixo"

    class Status(models.TextChoices):
        ACTIVE = "ativo", "Ativo"
        INACTIVE = "inativo", "Inativo"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic_id = models.UUIDField(null=True, blank=True, db_index=True)
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=14, blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    exam_type = models.CharField(max_length=100)
    last_exam_date = models.DateField()
    next_checkup_date = models.DateField(null=True, blank=True)
    risk_profile = models.CharField(max_length=10, choices=RiskProfile.choices, default=RiskProfile.LOW)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "patients"
        ordering = ["name"]
        indexes = [
            Index(fields=["status", "next_checkup_date"], name="patient_status_checkup_idx"),
        ]

    def __str__(self) -> str:
        return self.name


# ╭──────────────────────────────────────────────╮
# │ 3. Alertas                                  │
# ╰──────────────────────────────────────────────╯
class Alert(models.Model):
    class Type(models.TextChoices):
        CHECKUP_REMINDER = "checkup_reminder", "Lembrete de check-up"
        OVERDUE = "overdue", "Em atraso"
        URGENT = "urgent", "Urgente"

    class Status(models.TextChoices):
        PENDING = "pending", "Pendente"
        SENT = "sent", "Enviado"
        FAILED = "failed", "Falhou"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # referência fraca: o alerta sobrevive à remoção do paciente
    patient_id = models.UUIDField(db_index=True)
    patient_name = models.CharField(max_length=255)
    clinic_id = models.UUIDField(null=True, blank=True, db_index=True)
    type = models.CharField(max_length=20, choices=Type.choices)
    message = models.TextField()
    scheduled_for = models.DateTimeField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "alerts"
        ordering = ["-created_at"]
        constraints = [
            UniqueConstraint(
                fields=["patient_id"],
                condition=Q(status="pending"),
                name="uniq_pending_alert_per_patient",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.type} → {self.patient_name} ({self.status})"


# ╭──────────────────────────────────────────────╮
# │ 4. Mensagens enviadas                       │
# ╰──────────────────────────────────────────────╯
class Message(models.Model):
    class Type(models.TextChoices):
        EMAIL = "email", "E-mail"
        WHATSAPP = "whatsapp", "WhatsApp"

    class Status(models.TextChoices):
        SENT = "enviado", "Enviado"
        DELIVERED = "entregue", "Entregue"
        READ = "lido", "Lido"
        ERROR = "erro", "Erro"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.UUIDField(db_index=True)
    patient_name = models.CharField(max_length=255)
    clinic_id = models.UUIDField(null=True, blank=True, db_index=True)
    type = models.CharField(max_length=10, choices=Type.choices)
    content = models.TextField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.SENT)
    sent_at = models.DateTimeField()
    scheduled_for = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "messages"
        ordering = ["-sent_at"]

    def __str__(self) -> str:
        return f"{self.type} → {self.patient_name}"
