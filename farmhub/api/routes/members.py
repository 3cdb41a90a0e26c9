from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from ...core.errors import NotFoundError
from ...schemas.member import MemberCreate, MemberOut
from ...services.member_service import create_member, get_member, list_members
from ...services.uploads import MEMBER_UPLOADS, UploadIntake
from ..deps import get_db, get_upload_intake, require_admin
from ..forms import parse_fields, read_payload

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=list[MemberOut])
def list_all(search: str | None = None, db: Session = Depends(get_db)):
    return list_members(db, search=search)


@router.post("", response_model=MemberOut, status_code=status.HTTP_201_CREATED)
async def create(
    request: Request,
    db: Session = Depends(get_db),
    intake: UploadIntake = Depends(get_upload_intake),
):
    fields, files = await read_payload(request)
    # files are stored before the fields are checked; a later 400 leaves them orphaned
    stored = await intake.intake(files, MEMBER_UPLOADS)
    payload = parse_fields(MemberCreate, fields, missing_message="All required fields must be filled")
    return create_member(db, payload, passport_photos=stored.get("passport_photos"))


@router.get("/{member_id}", response_model=MemberOut)
def get_one(member_id: str, db: Session = Depends(get_db)):
    member = get_member(db, member_id)
    if not member:
        raise NotFoundError("Member not found")
    return member
