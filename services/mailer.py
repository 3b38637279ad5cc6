# services/mailer.py
"""
Test email composition and synchronous SMTP delivery

Messages are built with the standard library MIME classes and handed to
aiosmtplib, which is driven to completion on the calling thread. Nothing is
queued or retried: a failed send raises straight back to the request that
triggered it.
"""

import asyncio
import logging
from dataclasses import dataclass
from email.message import Message
from email.mime.image import MIMEImage
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from enum import Enum
from pathlib import Path
from typing import Optional

import aiosmtplib

from assets import STATIC_DIR

logger = logging.getLogger(__name__)

FROM_ADDRESS = 'simple-flask-docker@example.com'
LOGO_PATH = STATIC_DIR / 'email-logo.png'
LOGO_FILENAME = 'email-logo.png'

HTML_BODY = '<h1>This is the html version of an email</h1>'
TEXT_BODY = 'This is the text version of an email'


class MessageFormat(Enum):
    """Body representations a test email can carry"""
    MULTIPART = "multipart"
    HTML = "html"
    TEXT = "text"


SUBJECTS = {
    MessageFormat.MULTIPART: 'Multi-part email',
    MessageFormat.HTML: 'HTML email',
    MessageFormat.TEXT: 'Text email',
}


@dataclass
class EmailOptions:
    """What to send and to whom"""
    recipient: str
    include_attachment: bool = False
    format: MessageFormat = MessageFormat.MULTIPART


@dataclass
class SMTPSettings:
    """SMTP connection settings, passed through verbatim to aiosmtplib"""
    host: Optional[str]
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    domain: Optional[str] = None


def _body_parts(message_format: MessageFormat) -> list:
    parts = []
    # multipart/alternative lists parts from least to most preferred
    if message_format in (MessageFormat.MULTIPART, MessageFormat.TEXT):
        parts.append(MIMEText(TEXT_BODY, 'plain', 'utf-8'))
    if message_format in (MessageFormat.MULTIPART, MessageFormat.HTML):
        parts.append(MIMEText(HTML_BODY, 'html', 'utf-8'))
    return parts


def _logo_attachment(logo_path: Path) -> MIMEImage:
    attachment = MIMEImage(logo_path.read_bytes(), 'png')
    attachment.add_header('Content-Disposition', 'attachment', filename=LOGO_FILENAME)
    return attachment


def build_message(options: EmailOptions,
                  from_address: str = FROM_ADDRESS,
                  logo_path: Path = LOGO_PATH,
                  domain: Optional[str] = None) -> Message:
    """
    Compose a test email ready for delivery

    A single body part is used as-is, two become a multipart/alternative
    container. When the logo is requested the body is wrapped in a
    multipart/mixed container alongside the image.

    Args:
        options: Recipient, attachment flag and body format
        from_address: Sender address
        logo_path: Location of the PNG attached when requested
        domain: Domain used for the Message-ID

    Returns:
        The composed message with all headers set
    """
    parts = _body_parts(options.format)

    if len(parts) > 1:
        body = MIMEMultipart('alternative')
        for part in parts:
            body.attach(part)
    else:
        body = parts[0]

    if options.include_attachment:
        msg = MIMEMultipart('mixed')
        msg.attach(body)
        msg.attach(_logo_attachment(Path(logo_path)))
    else:
        msg = body

    msg['Subject'] = SUBJECTS[options.format]
    msg['From'] = from_address
    msg['To'] = options.recipient
    msg['Date'] = formatdate(localtime=True)
    msg['Message-ID'] = make_msgid(domain=domain)

    return msg


class Mailer:
    """Builds the test emails and delivers them over SMTP"""

    def __init__(self, settings: SMTPSettings,
                 from_address: str = FROM_ADDRESS,
                 logo_path: Path = LOGO_PATH):
        self.settings = settings
        self.from_address = from_address
        self.logo_path = Path(logo_path)

    def _build(self, recipient: str, add_logo: bool, message_format: MessageFormat) -> Message:
        options = EmailOptions(recipient=recipient,
                               include_attachment=add_logo,
                               format=message_format)
        return build_message(options,
                             from_address=self.from_address,
                             logo_path=self.logo_path,
                             domain=self.settings.domain)

    def multipart_email(self, recipient: str, add_logo: bool = False) -> Message:
        return self._build(recipient, add_logo, MessageFormat.MULTIPART)

    def html_email(self, recipient: str, add_logo: bool = False) -> Message:
        return self._build(recipient, add_logo, MessageFormat.HTML)

    def text_email(self, recipient: str, add_logo: bool = False) -> Message:
        return self._build(recipient, add_logo, MessageFormat.TEXT)

    def deliver(self, msg: Message) -> None:
        """Send a message and block until the SMTP server has accepted it"""
        logger.info(f"Sending '{msg['Subject']}' to {msg['To']} via {self.settings.host}:{self.settings.port}")
        asyncio.run(self._send(msg))
        logger.info(f"Email to {msg['To']} accepted for delivery")

    async def _send(self, msg: Message):
        # start_tls=None upgrades the connection when the server offers STARTTLS
        return await aiosmtplib.send(
            msg,
            hostname=self.settings.host,
            port=self.settings.port,
            username=self.settings.username,
            password=self.settings.password,
            local_hostname=self.settings.domain,
            start_tls=None,
        )
