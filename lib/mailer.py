# =============================================================================
# lib/mailer.py - SMTP Transport
# =============================================================================
# Thin blocking wrapper around smtplib. Callers on the event loop run
# `send()` in a worker thread.
# =============================================================================

import smtplib
from dataclasses import dataclass
from email.message import EmailMessage


class MailerError(Exception):
    """Raised when the SMTP server rejects or drops a message."""


@dataclass(frozen=True)
class SmtpMailer:
    """
    Sends HTML email through an authenticated STARTTLS SMTP server.

    Example:
        mailer = SmtpMailer("smtp.gmail.com", 587, "me@gmail.com", "app-password")
        mailer.send("me@gmail.com", "jane@example.com", "Hi", "<p>Hello</p>")
    """

    host: str
    port: int
    username: str
    password: str
    timeout: float = 10.0
    use_tls: bool = True

    def send(self, sender: str, recipient: str, subject: str, html: str) -> None:
        msg = EmailMessage()
        msg["From"] = sender
        msg["To"] = recipient
        msg["Subject"] = subject
        msg.set_content("This message requires an HTML-capable email client.")
        msg.add_alternative(html, subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                smtp.login(self.username, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailerError(f"Failed to send to {recipient}: {e}") from e
