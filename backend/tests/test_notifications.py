"""
Tests for applicant notification tasks
"""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from jia.core.celery_app import celery_app
from jia.tasks.notification_tasks import build_screening_email, send_screening_email_task


class TestCeleryApp:
    """Celery app configuration."""

    def test_registers_notification_tasks(self):
        assert "jia.tasks.notification_tasks" in celery_app.conf.include

    def test_json_only(self):
        assert celery_app.conf.task_serializer == "json"


class TestScreeningEmail:
    """CV screening notification."""

    def test_message_headers(self):
        msg = build_screening_email("ana@example.com", "Ana Cruz", "Backend Engineer")

        assert msg["To"] == "ana@example.com"
        assert msg["Subject"] == "Your application for Backend Engineer"

    def test_name_is_escaped_in_html(self):
        msg = build_screening_email("ana@example.com", "<b>Ana</b>", "Backend Engineer")
        html = msg.get_payload()[1].get_payload(decode=True).decode()

        assert "<b>Ana</b>" not in html
        assert "&lt;b&gt;Ana&lt;/b&gt;" in html

    def test_skipped_without_smtp_host(self):
        with patch("jia.tasks.notification_tasks.settings.SMTP_HOST", None), \
                patch("jia.tasks.notification_tasks.smtplib.SMTP") as smtp:
            assert send_screening_email_task("ana@example.com", "Ana", "Engineer") is False

        smtp.assert_not_called()

    def test_sends_over_smtp(self):
        server = MagicMock()
        with patch("jia.tasks.notification_tasks.settings.SMTP_HOST", "smtp.example.com"), \
                patch("jia.tasks.notification_tasks.smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            assert send_screening_email_task("ana@example.com", "Ana", "Engineer") is True

        server.starttls.assert_called_once()
        assert server.sendmail.call_args[0][1] == ["ana@example.com"]

    def test_smtp_failure_raises(self):
        with patch("jia.tasks.notification_tasks.settings.SMTP_HOST", "smtp.example.com"), \
                patch("jia.tasks.notification_tasks.smtplib.SMTP", side_effect=smtplib.SMTPException("down")):
            with pytest.raises(smtplib.SMTPException):
                send_screening_email_task("ana@example.com", "Ana", "Engineer")
