from sqlalchemy.orm import Session
from sqlalchemy import String, select, or_, func
from sqlalchemy.exc import SQLAlchemyError
import logging
from ..core.errors import StoreError
from ..models.member import Member
from ..schemas.member import MemberCreate

logger = logging.getLogger(__name__)


def create_member(db: Session, payload: MemberCreate, *, passport_photos: list[str] | None = None) -> Member:
    try:
        member = Member(**payload.model_dump(), passport_photos=list(passport_photos or []))
        db.add(member)
        db.commit()
        db.refresh(member)
        logger.info(f"Member created: id={member.id}, surname={member.surname}, photos={len(member.passport_photos)}")
        return member
    except SQLAlchemyError as e:
        logger.error(f"Member save error: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Error saving member")


def get_member(db: Session, member_id: str) -> Member | None:
    return db.get(Member, member_id)


def list_members(db: Session, *, search: str | None = None) -> list[Member]:
    q = select(Member).order_by(Member.created_at, Member.id)
    term = (search or "").strip().lower()
    if term:
        full_name = func.lower(Member.surname + " " + Member.other_names, type_=String)
        q = q.where(or_(
            full_name.contains(term, autoescape=True),
            func.lower(Member.location, type_=String).contains(term, autoescape=True),
            func.lower(Member.phone, type_=String).contains(term, autoescape=True),
            func.lower(Member.contact, type_=String).contains(term, autoescape=True),
        ))
    return list(db.execute(q).scalars())
