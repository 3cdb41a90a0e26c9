from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging
from ...core.errors import NotFoundError
from ...schemas.common import MessageOut
from ...schemas.news import NewsIn, NewsOut
from ...services import news_service
from ...services.uploads import NEWS_UPLOADS, UploadIntake
from ..deps import get_db, get_upload_intake, require_admin
from ..forms import parse_fields, read_payload

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING = "Title and description required"


@router.get("", response_model=list[NewsOut])
def list_all(db: Session = Depends(get_db)):
    return news_service.list_news(db)


@router.post("", response_model=NewsOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
async def create(
    request: Request,
    db: Session = Depends(get_db),
    intake: UploadIntake = Depends(get_upload_intake),
):
    fields, files = await read_payload(request)
    stored = await intake.intake(files, NEWS_UPLOADS)
    payload = parse_fields(NewsIn, fields, missing_message=MISSING)
    return news_service.create_news(
        db,
        title=payload.title,
        description=payload.description,
        image_url=stored.get("image_url"),
        video_url=stored.get("video_url"),
    )


@router.put("/{news_id}", response_model=NewsOut, dependencies=[Depends(require_admin)])
async def update(
    news_id: str,
    request: Request,
    db: Session = Depends(get_db),
    intake: UploadIntake = Depends(get_upload_intake),
):
    fields, files = await read_payload(request)
    stored = await intake.intake(files, NEWS_UPLOADS)
    payload = parse_fields(NewsIn, fields, missing_message=MISSING)
    news = news_service.get_news(db, news_id)
    if not news:
        raise NotFoundError("News not found")
    return news_service.update_news(
        db,
        news,
        title=payload.title,
        description=payload.description,
        image_url=stored.get("image_url"),
        video_url=stored.get("video_url"),
    )


@router.delete("/{news_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete(
    news_id: str,
    db: Session = Depends(get_db),
    intake: UploadIntake = Depends(get_upload_intake),
):
    news = news_service.get_news(db, news_id)
    if not news:
        raise NotFoundError("News not found")
    for url in news_service.delete_news(db, news):
        intake.remove(url)
    return MessageOut(message="News deleted successfully")
