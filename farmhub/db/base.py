from ..models.user import User, UserRole
from ..models.member import Member, Gender, EnrollmentStatus, IrrigationMethod, MembershipStatus
from ..models.news import News
from ..models.contact import Contact
from ..db.base_class import Base
