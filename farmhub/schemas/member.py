import re
from datetime import date, datetime
from typing import Any
from pydantic import field_validator
from .common import InputModel, ORMModel
from ..models.member import Gender, EnrollmentStatus, IrrigationMethod, MembershipStatus

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MemberCreate(InputModel):
    surname: str
    other_names: str
    date_of_birth: date
    gender: Gender
    occupation: str
    qualification: str
    local_government_of_origin: str
    residential_address: str
    phone: str
    next_of_kin: str
    enrollment_status: EnrollmentStatus
    date_enrollment: date
    short_farm_history: str
    referee_lga_coordinator: str | None = None
    referee_group_coordinator: str | None = None
    crop_variety: str
    farming_experience: int
    irrigation_method: IrrigationMethod
    membership_status: MembershipStatus = MembershipStatus.PENDING
    location: str
    farm_size: str
    contact: str

    @field_validator("farming_experience", mode="before")
    @classmethod
    def _leading_integer(cls, v: Any) -> Any:
        # "5 years" -> 5, the way the registration form has always been read
        if isinstance(v, str):
            m = _LEADING_INT.match(v)
            if m:
                return int(m.group(1))
        return v

    @field_validator("membership_status", mode="before")
    @classmethod
    def _default_status(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return MembershipStatus.PENDING
        return v

    @field_validator("date_of_birth", "date_enrollment", mode="before")
    @classmethod
    def _date_part(cls, v: Any) -> Any:
        # accept full ISO timestamps as well as plain dates
        if isinstance(v, str) and "T" in v:
            return datetime.fromisoformat(v.strip().replace("Z", "+00:00")).date()
        return v


class MemberOut(ORMModel):
    id: str
    surname: str
    other_names: str
    date_of_birth: date
    gender: Gender
    occupation: str
    qualification: str
    local_government_of_origin: str
    residential_address: str
    phone: str
    next_of_kin: str
    enrollment_status: EnrollmentStatus
    date_enrollment: date
    short_farm_history: str
    referee_lga_coordinator: str | None = None
    referee_group_coordinator: str | None = None
    passport_photos: list[str] = []
    crop_variety: str
    farming_experience: int
    irrigation_method: IrrigationMethod
    membership_status: MembershipStatus
    location: str
    farm_size: str
    contact: str
    created_at: datetime
