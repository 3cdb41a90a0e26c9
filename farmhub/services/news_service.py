from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
import logging
from ..core.errors import StoreError
from ..models.news import News
from ..models import utcnow

logger = logging.getLogger(__name__)


def list_news(db: Session) -> list[News]:
    return list(db.execute(select(News).order_by(News.created_at.desc(), News.id)).scalars())


def get_news(db: Session, news_id: str) -> News | None:
    return db.get(News, news_id)


def create_news(db: Session, *, title: str, description: str,
                image_url: str | None = None, video_url: str | None = None) -> News:
    try:
        news = News(title=title, description=description, image_url=image_url, video_url=video_url)
        db.add(news)
        db.commit()
        db.refresh(news)
        logger.info(f"News created: id={news.id}, title={news.title!r}")
        return news
    except SQLAlchemyError as e:
        logger.error(f"News save error: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Error saving news")


def update_news(db: Session, news: News, *, title: str, description: str,
                image_url: str | None = None, video_url: str | None = None) -> News:
    # media is only replaced when a new file arrived; the old file stays on disk
    try:
        news.title = title
        news.description = description
        if image_url:
            news.image_url = image_url
        if video_url:
            news.video_url = video_url
        news.updated_at = utcnow()
        db.commit()
        db.refresh(news)
        logger.info(f"News updated: id={news.id}")
        return news
    except SQLAlchemyError as e:
        logger.error(f"News update error for {news.id}: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Error updating news")


def delete_news(db: Session, news: News) -> list[str]:
    """Delete the record; returns the media URLs it referenced."""
    media = [u for u in (news.image_url, news.video_url) if u]
    try:
        db.delete(news)
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Delete error for news {news.id}: {str(e)}", exc_info=True)
        db.rollback()
        raise StoreError("Error deleting news")
    logger.info(f"News deleted: id={news.id}")
    return media
