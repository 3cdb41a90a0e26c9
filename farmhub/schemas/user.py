from .common import ORMModel
from ..models.user import UserRole


class UserOut(ORMModel):
    id: str
    email: str
    role: UserRole
