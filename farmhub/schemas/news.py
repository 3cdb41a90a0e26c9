from datetime import datetime
from .common import InputModel, ORMModel


class NewsIn(InputModel):
    title: str
    description: str


class NewsOut(ORMModel):
    id: str
    title: str
    description: str
    image_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime
