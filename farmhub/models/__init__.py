from datetime import datetime, timezone
def utcnow():
    return datetime.now(timezone.utc)
from .user import User, UserRole
from .member import Member
from .news import News
from .contact import Contact
