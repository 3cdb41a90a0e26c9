from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging
from ..core.config import Settings
from ..core.errors import RelayError, StoreError
from ..models.contact import Contact
from .mailer import Mailer

logger = logging.getLogger(__name__)

SUBJECT = "New Contact Form Submission"


def save_contact(db: Session, *, name: str, email: str, message: str) -> Contact:
    try:
        contact = Contact(name=name, email=email, message=message)
        db.add(contact)
        db.commit()
        db.refresh(contact)
        return contact
    except SQLAlchemyError as e:
        logger.error(f"Contact save error: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Error saving message")


async def notify_admin(mailer: Mailer, settings: Settings, contact: Contact) -> bool:
    """Relay the submission to the admin inbox; False when delivery failed."""
    body = f"Name: {contact.name}\nEmail: {contact.email}\nMessage: {contact.message}"
    try:
        await mailer.send(sender=settings.EMAIL_USER, to=settings.ADMIN_EMAIL, subject=SUBJECT, body=body)
    except RelayError as e:
        logger.error(f"Email error for contact {contact.id}: {e.message}", exc_info=True)
        return False
    return True
