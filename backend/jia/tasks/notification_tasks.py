"""
Applicant notification tasks
"""
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape

from celery import Task
import structlog

from jia.core.celery_app import celery_app
from jia.core.config import settings

logger = structlog.get_logger()


def build_screening_email(recipient: str, applicant_name: str, job_title: str) -> MIMEMultipart:
    """Plain text and HTML message telling the applicant their CV was screened"""
    name = applicant_name or "Applicant"
    subject = f"Your application for {job_title}" if job_title else "Your application"
    body = f"Dear {name},\n\nYour CV has been successfully screened.\n"
    html_body = (
        "<div>"
        f"<p>Dear {escape(name)},</p>"
        "<p>Your CV has been successfully screened.</p>"
        "</div>"
    )

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = settings.SMTP_FROM_EMAIL
    msg["To"] = recipient
    msg.attach(MIMEText(body, "plain", "utf-8"))
    msg.attach(MIMEText(html_body, "html", "utf-8"))
    return msg


@celery_app.task(bind=True, max_retries=3)
def send_screening_email_task(self: Task, recipient: str, applicant_name: str, job_title: str):
    """Send the CV screening notification over SMTP"""
    if not settings.SMTP_HOST:
        logger.warning("smtp_not_configured", recipient=recipient)
        return False

    msg = build_screening_email(recipient, applicant_name, job_title)
    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
            server.starttls()
            if settings.SMTP_USER and settings.SMTP_PASSWORD:
                server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            server.sendmail(settings.SMTP_FROM_EMAIL, [recipient], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        logger.error("screening_email_failed", recipient=recipient, error=str(e))
        raise self.retry(exc=e, countdown=60)

    logger.info("screening_email_sent", recipient=recipient)
    return True
