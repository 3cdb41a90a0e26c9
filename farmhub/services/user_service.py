from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging
from ..core.errors import StoreError, ValidationError
from ..models.user import User, UserRole
from .security import hash_password, verify_password

logger = logging.getLogger(__name__)


def create_user(db: Session, *, email: str, password: str, role: UserRole = UserRole.USER) -> User:
    try:
        logger.info(f"Creating user: email={email}, role={role}")
        user = User(email=email, hashed_password=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"User created successfully: id={user.id}, email={user.email}")
        return user
    except IntegrityError:
        # lost a race with a concurrent registration for the same address
        db.rollback()
        logger.warning(f"Duplicate email on insert: {email}")
        raise ValidationError("Email already used")
    except SQLAlchemyError as e:
        logger.error(f"Error creating user with email {email}: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Server error during registration")


def get_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = get_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def promote_to_admin(db: Session, user: User) -> User:
    user.role = UserRole.ADMIN
    db.commit()
    db.refresh(user)
    return user
