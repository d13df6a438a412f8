# Pydantic model used to validate the scalar part of a new base document
from pydantic import BaseModel, ConfigDict


class BaseDocumentFields(BaseModel):
    # strict: no "1990" -> 1990 or 42 -> "42" coercion; unknown keywords are rejected
    model_config = ConfigDict(strict=True, extra="forbid")

    email: str
    phone_number: str
    ip: str
    name: str
    aka: str # 'alias' in the API, use name if there is no alias
    entity_type: str # consult your organization's CIP for valid options, e.g. "M", "F", "LLC"
    entity_scope: str # e.g. "Arts & Entertainment", "Not Known"
    birth_day: int
    birth_month: int
    birth_year: int
    address_street: str
    address_city: str
    address_subdivision: str
    address_postal_code: str
    address_country_code: str
