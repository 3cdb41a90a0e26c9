from email_validator import EmailNotValidError, validate_email
from pydantic import field_validator
from .common import InputModel, ORMModel


class RegisterIn(InputModel):
    verbatim_fields = frozenset({"password"})

    email: str | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def _well_formed(cls, v: str | None) -> str | None:
        # syntax check only; the address is stored as typed so login matches it
        if v is not None:
            try:
                validate_email(v, check_deliverability=False)
            except EmailNotValidError as e:
                raise ValueError(str(e)) from e
        return v


class LoginIn(InputModel):
    verbatim_fields = frozenset({"password"})

    email: str | None = None
    password: str | None = None


class TokenOut(ORMModel):
    token: str
    token_type: str = "bearer"
