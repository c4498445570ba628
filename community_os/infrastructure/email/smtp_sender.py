import asyncio
import logging
import smtplib
from email.message import EmailMessage

from community_os.config.settings import Config
from community_os.domain.ports.services import EmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(EmailSender):
    """SMTP delivery (STARTTLS unless disabled). Without credentials every send is a no-op."""

    def __init__(
        self,
        server: str = Config.SMTP_SERVER,
        port: int = Config.SMTP_PORT,
        user: str = Config.SMTP_USER,
        password: str = Config.SMTP_PASSWORD,
        use_tls: bool = Config.SMTP_USE_TLS,
    ):
        self._server = server
        self._port = port
        self._user = user
        self._password = password
        self._use_tls = use_tls

    @property
    def configured(self) -> bool:
        return bool(self._user and self._password)

    async def send(self, to_address: str, subject: str, body: str) -> bool:
        if not self.configured:
            logger.debug("SMTP credentials are not configured, skipping email")
            return False
        if not to_address:
            return False

        msg = EmailMessage()
        msg["From"] = self._user
        msg["To"] = to_address
        msg["Subject"] = subject
        msg.set_content(body)

        try:
            await asyncio.to_thread(self._deliver, msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email: {str(e)}")
            return False
        return True

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self._server, self._port) as server:
            if self._use_tls:
                server.starttls()
            server.login(self._user, self._password)
            server.send_message(msg)
