from pydantic import BaseModel


class ClinicSettingsUpdateDTO(BaseModel):
    name: str | None = None
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
    whatsapp_template: str | None = None
    email_template: str | None = None
