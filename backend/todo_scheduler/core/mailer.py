"""Outgoing email over SMTP."""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from .config import settings

logger = logging.getLogger(__name__)


class MailerError(Exception):
    pass


class SMTPMailer:
    """Sends plain-text mail through one SMTP relay using STARTTLS."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_name: str,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_name = from_name
        self.timeout = timeout

    def build_message(self, to: str, subject: str, text: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr((self.from_name, self.username))
        msg["To"] = to
        msg["Subject"] = subject
        msg["Message-ID"] = make_msgid(domain=self.username.rpartition("@")[2] or None)
        msg.set_content(text)
        return msg

    def send(self, to: str, subject: str, text: str) -> str:
        """Deliver a message and return its Message-ID."""
        if not self.username or not self.password:
            raise MailerError("SMTP credentials are not configured (EMAIL_USER / EMAIL_PASS)")

        msg = self.build_message(to, subject, text)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.starttls()
                smtp.login(self.username, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailerError(str(exc)) from exc

        logger.info("Message sent: %s", msg["Message-ID"])
        return msg["Message-ID"]


def get_mailer() -> SMTPMailer:
    return SMTPMailer(
        host=settings.email_host,
        port=settings.email_port,
        username=settings.email_user,
        password=settings.email_pass,
        from_name=settings.email_from_name,
    )
