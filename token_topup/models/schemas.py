"""Data models for company and user validation."""
from dataclasses import dataclass, field
from typing import Any, List

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base schema for input records.

    Strict mode keeps JSON types apart: ``true`` is not an int, ``1`` is not
    a bool and ``5.0`` is not an int. Unknown keys are kept so a record can
    be dumped back to its input shape.
    """
    model_config = ConfigDict(strict=True, extra="allow")

    @classmethod
    def expected_type(cls, field: str) -> str:
        """Return the name of the type expected for a schema field."""
        field_info = cls.model_fields.get(field)
        if field_info is None or field_info.annotation is None:
            return "unknown"
        return getattr(field_info.annotation, "__name__", str(field_info.annotation))


class Company(Record):
    """Company schema."""
    id: int
    name: str
    top_up: int
    email_status: bool


class User(Record):
    """User schema. ``tokens`` is raised in place by the top-up."""
    id: int
    company_id: int
    first_name: str
    last_name: str
    email: str
    tokens: int
    active_status: bool
    email_status: bool


@dataclass
class Defect:
    """A single schema violation recorded against one record."""
    label: str
    record_id: Any
    field: str
    message: str


@dataclass
class UserTopUp:
    """A user that was topped up, with the balance before the top-up."""
    user: User
    previous_tokens: int

    @property
    def new_tokens(self) -> int:
        return self.user.tokens


@dataclass
class CompanyTopUpSummary:
    """Outcome of topping up every eligible user of one company."""
    company: Company
    users_emailed: List[UserTopUp] = field(default_factory=list)
    users_not_emailed: List[UserTopUp] = field(default_factory=list)

    @property
    def user_count(self) -> int:
        return len(self.users_emailed) + len(self.users_not_emailed)

    @property
    def total(self) -> int:
        """Total tokens disbursed: the company top-up times eligible users."""
        return self.company.top_up * self.user_count
