"""
Celery configuration for Django project.
Named celery_app.py to avoid conflict with celery package.
"""
import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "spgs_app.settings")

app = Celery("spgs_background_tasks")

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Task modules live outside the Django apps
app.autodiscover_tasks(["tasks"], related_name="storage_tasks")
