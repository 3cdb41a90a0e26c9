from email.message import EmailMessage
import logging
import aiosmtplib
from ..core.config import Settings
from ..core.errors import RelayError

logger = logging.getLogger(__name__)


class Mailer:
    """Best-effort SMTP relay. Every delivery problem surfaces as ``RelayError``."""

    def __init__(self, *, host: str, port: int, username: str | None = None,
                 password: str | None = None, timeout: float = 30.0):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            timeout=settings.SMTP_TIMEOUT,
        )

    async def send(self, *, sender: str | None, to: str | None, subject: str, body: str) -> None:
        if not sender or not to:
            raise RelayError("Email relay is not configured")
        msg = EmailMessage()
        msg["From"] = sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body)
        credentials = {}
        if self.username and self.password:
            credentials = {"username": self.username, "password": self.password}
        try:
            await aiosmtplib.send(
                msg,
                hostname=self.host,
                port=self.port,
                use_tls=self.port == 465,  # Implicit TLS for port 465
                start_tls=True if self.port == 587 else None,
                timeout=self.timeout,
                **credentials,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise RelayError(f"{type(e).__name__}: {e}") from e
        logger.info(f"Notification '{subject}' relayed to {to}")
