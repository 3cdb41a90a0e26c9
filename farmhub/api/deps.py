from typing import Generator
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from ..core.config import Settings
from ..core.errors import Forbidden
from ..models.user import UserRole
from ..services.mailer import Mailer
from ..services.security import Identity, TokenService
from ..services.uploads import UploadIntake

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_upload_intake(request: Request) -> UploadIntake:
    return request.app.state.upload_intake


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    return tokens.verify(credentials.credentials if credentials else None)


def require_role(role: UserRole):
    def _gate(identity: Identity = Depends(get_identity)) -> Identity:
        if identity.role != role:
            raise Forbidden()
        return identity
    return _gate


require_admin = require_role(UserRole.ADMIN)
