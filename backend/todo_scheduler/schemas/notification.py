from pydantic import EmailStr, Field

from .base import APIModel


class SendEmailIn(APIModel):
    to: EmailStr
    subject: str = Field(min_length=1, max_length=200)
    text: str = Field(min_length=1, max_length=10000)


class SendEmailOut(APIModel):
    message: str
    message_id: str
