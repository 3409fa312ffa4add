from datetime import date

from pydantic import BaseModel


class PatientDTO(BaseModel):
    name: str
    exam_type: str
    last_exam_date: date
    risk_profile: str = "baixo"
    status: str = "ativo"
    cpf: str | None = None
    phone: str | None = None
    email: str | None = None
    clinic_id: str | None = None


class PatientUpdateDTO(BaseModel):
    name: str | None = None
    exam_type: str | None = None
    last_exam_date: date | None = None
    risk_profile: str | None = None
    status: str | None = None
    cpf: str | None = None
    phone: str | None = None
    email: str | None = None
