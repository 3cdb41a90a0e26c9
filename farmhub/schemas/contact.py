from .common import InputModel


class ContactIn(InputModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None
