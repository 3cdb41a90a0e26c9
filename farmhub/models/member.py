from enum import StrEnum
from datetime import date, datetime
from sqlalchemy import String, DateTime, Date, Integer, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow


class Gender(StrEnum):
    NOT_SPECIFIED = "Not specified"
    MALE = "Male"
    FEMALE = "Female"


class EnrollmentStatus(StrEnum):
    DIRECT_FARMER = "Direct Farmer"
    GROUP_FARMER = "Group Farmer"


class IrrigationMethod(StrEnum):
    RAINFED = "Rainfed"
    DRIP = "Drip"
    FLOOD = "Flood"


class MembershipStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"


class Member(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))

    # identity
    surname: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    other_names: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender] = mapped_column(nullable=False)
    occupation: Mapped[str] = mapped_column(String(128), nullable=False)
    qualification: Mapped[str] = mapped_column(String(128), nullable=False)
    local_government_of_origin: Mapped[str] = mapped_column(String(128), nullable=False)

    # contact
    residential_address: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    next_of_kin: Mapped[str] = mapped_column(String(255), nullable=False)
    contact: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)

    # enrollment
    enrollment_status: Mapped[EnrollmentStatus] = mapped_column(nullable=False)
    date_enrollment: Mapped[date] = mapped_column(Date, nullable=False)
    referee_lga_coordinator: Mapped[str | None] = mapped_column(String(255))
    referee_group_coordinator: Mapped[str | None] = mapped_column(String(255))
    membership_status: Mapped[MembershipStatus] = mapped_column(default=MembershipStatus.PENDING, nullable=False)

    # farm
    short_farm_history: Mapped[str] = mapped_column(Text, nullable=False)
    crop_variety: Mapped[str] = mapped_column(String(255), nullable=False)
    farming_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    irrigation_method: Mapped[IrrigationMethod] = mapped_column(nullable=False)
    farm_size: Mapped[str] = mapped_column(String(64), nullable=False)

    passport_photos: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
