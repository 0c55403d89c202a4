from pydantic import BaseModel, Field

from research.roles import ProviderFamily, Role
from research.session import SessionState


class ModelOptionResponse(BaseModel):
    value: str
    label: str


class CatalogFamilyResponse(BaseModel):
    family: ProviderFamily
    options: list[ModelOptionResponse]


class RoleFieldResponse(BaseModel):
    role: Role
    label: str
    description: str
    family: ProviderFamily
    options: list[ModelOptionResponse]
    selected: str


class ConfigResponse(BaseModel):
    models: dict[str, str]
    revision: int


class SessionResponse(BaseModel):
    session_id: str
    state: SessionState
    working: dict[str, str]
    dirty: bool
    fields: list[RoleFieldResponse]


class AssignmentUpdate(BaseModel):
    model_id: str = Field(..., min_length=1, max_length=200)
