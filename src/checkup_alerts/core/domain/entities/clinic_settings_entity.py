from __future__ import annotations

import uuid
from dataclasses import dataclass

from checkup_alerts.core.domain.entities._base import EntityMixin


@dataclass(slots=True)
class ClinicSettingsEntity(EntityMixin):
    id: uuid.UUID
    name: str
    whatsapp_template: str
    email_template: str
    cnpj: str | None = None
    email: str | None = None
    phone: str | None = None
    whatsapp_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    logo: str | None = None
    email_signature: str | None = None
