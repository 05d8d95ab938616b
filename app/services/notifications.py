"""
Notification Service

Sends the account emails of the auth flow: verification code, welcome,
password-reset link and reset confirmation.

Delivery is best-effort. Every send returns True/False and never raises, so a
mail outage cannot undo a signup or a password reset that already happened.
"""

import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Protocol

from app.config import settings
from app.services import email_templates as templates

logger = logging.getLogger("app.notifications")


class Notifier(Protocol):
    def send_verification_email(self, email: str, verification_code: str) -> bool: ...

    def send_welcome_email(self, email: str, name: str) -> bool: ...

    def send_password_reset_email(self, email: str, reset_url: str) -> bool: ...

    def send_reset_success_email(self, email: str) -> bool: ...


class SmtpNotifier:
    def __init__(self, server: str, port: int, sender_email: str, sender_password: str, sender_name: str = ""):
        self.server = server
        self.port = port
        self.sender_email = sender_email
        self.sender_password = sender_password
        self.sender_name = sender_name

    def send_verification_email(self, email: str, verification_code: str) -> bool:
        body = templates.VERIFICATION_EMAIL_TEMPLATE.format(verification_code=verification_code)
        return self._send(email, templates.VERIFICATION_EMAIL_SUBJECT, body, category="verification")

    def send_welcome_email(self, email: str, name: str) -> bool:
        body = templates.WELCOME_EMAIL_TEMPLATE.format(name=html.escape(name))
        return self._send(email, templates.WELCOME_EMAIL_SUBJECT, body, category="welcome")

    def send_password_reset_email(self, email: str, reset_url: str) -> bool:
        body = templates.PASSWORD_RESET_REQUEST_TEMPLATE.format(reset_url=reset_url)
        return self._send(email, templates.PASSWORD_RESET_REQUEST_SUBJECT, body, category="password-reset")

    def send_reset_success_email(self, email: str) -> bool:
        return self._send(
            email,
            templates.PASSWORD_RESET_SUCCESS_SUBJECT,
            templates.PASSWORD_RESET_SUCCESS_TEMPLATE,
            category="password-reset-success",
        )

    def _send(self, recipient: str, subject: str, html_body: str, category: str) -> bool:
        """
        Send one HTML email.

        Args:
            recipient (str): Recipient email address
            subject (str): Subject line
            html_body (str): Rendered HTML body
            category (str): Label used in logs only

        Returns:
            bool: True if email sent successfully, False otherwise
        """
        if not self.sender_email or not self.sender_password:
            logger.error("Email credentials not configured. Set SENDER_EMAIL and SENDER_PASSWORD environment variables.")
            return False

        message = MIMEMultipart("alternative")
        message["From"] = formataddr((self.sender_name, self.sender_email))
        message["To"] = recipient
        message["Subject"] = subject
        message.attach(MIMEText(html_body, "html"))

        try:
            with smtplib.SMTP(self.server, self.port) as server:
                server.starttls()
                server.login(self.sender_email, self.sender_password)
                server.send_message(message)

            logger.info("Sent %s email to %s", category, recipient)
            return True

        except smtplib.SMTPException as e:
            logger.error("SMTP error sending %s email to %s: %s", category, recipient, e)
            return False
        except OSError as e:
            logger.error("Error sending %s email to %s: %s", category, recipient, e)
            return False


def get_notifier() -> Notifier:
    return SmtpNotifier(
        server=settings.SMTP_SERVER,
        port=settings.SMTP_PORT,
        sender_email=settings.SENDER_EMAIL,
        sender_password=settings.SENDER_PASSWORD,
        sender_name=settings.SENDER_NAME,
    )
