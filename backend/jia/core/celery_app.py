"""
Celery application for background notifications
"""
from celery import Celery
from jia.core.config import settings

celery_app = Celery(
    "jia",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["jia.tasks.notification_tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    # Run workers with: celery -A jia.core.celery_app worker -Q notifications
    task_routes={"jia.tasks.notification_tasks.*": {"queue": "notifications"}},
    task_time_limit=120,
    task_soft_time_limit=90,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_ignore_result=True,
)
