import logging

from fastapi import APIRouter, Depends, HTTPException

from todo_scheduler.api.deps import get_current_user
from todo_scheduler.core.mailer import MailerError, SMTPMailer, get_mailer
from todo_scheduler.models import User
from todo_scheduler.schemas.notification import SendEmailIn, SendEmailOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/send-email", response_model=SendEmailOut)
def send_email(
    data: SendEmailIn,
    user: User = Depends(get_current_user),
    mailer: SMTPMailer = Depends(get_mailer),
):
    try:
        message_id = mailer.send(to=data.to, subject=data.subject, text=data.text)
    except MailerError as exc:
        logger.error("Email from user id=%s to %s failed: %s", user.id, data.to, exc)
        raise HTTPException(status_code=500, detail=f"Failed to send email: {exc}")

    return SendEmailOut(message="Email sent successfully", message_id=message_id)
