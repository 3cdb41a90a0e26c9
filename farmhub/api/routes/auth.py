from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from ...core.errors import InvalidCredentials, NotFoundError, ValidationError
from ...schemas.auth import RegisterIn, LoginIn, TokenOut
from ...schemas.user import UserOut
from ...services.user_service import create_user, authenticate, get_by_email, get_user
from ...services.security import Identity, TokenService
from ..deps import get_db, get_identity, get_token_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    if not payload.email or not payload.password:
        raise ValidationError("Email and password required")
    logger.info(f"Registration attempt for email: {payload.email}")
    if get_by_email(db, payload.email):
        logger.warning(f"Registration failed: Email already used - {payload.email}")
        raise ValidationError("Email already used")
    return create_user(db, email=payload.email, password=payload.password)


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    if not payload.email or not payload.password:
        raise ValidationError("Email and password required")
    user = authenticate(db, email=payload.email, password=payload.password)
    if not user:
        logger.warning(f"Rejected login for email: {payload.email}")
        raise InvalidCredentials()
    return TokenOut(token=tokens.issue(user.id, user.role))


@router.get("/user", response_model=UserOut)
def me(db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    user = get_user(db, identity.id)
    if not user:
        raise NotFoundError("User not found")
    return user
