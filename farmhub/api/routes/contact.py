from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ...core.config import Settings
from ...core.errors import ValidationError
from ...schemas.common import MessageOut
from ...schemas.contact import ContactIn
from ...services.contact_service import save_contact, notify_admin
from ...services.mailer import Mailer
from ..deps import get_db, get_mailer, get_settings

router = APIRouter()


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def submit(
    payload: ContactIn,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    if not payload.name or not payload.email or not payload.message:
        raise ValidationError("All fields required")
    contact = save_contact(db, name=payload.name, email=payload.email, message=payload.message)
    # the stored message stands whatever the relay does
    if await notify_admin(mailer, settings, contact):
        return MessageOut(message="Message sent successfully")
    return MessageOut(message="Message saved, but email notification failed")
