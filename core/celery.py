import os
from celery import Celery

settings_module = os.environ.get('DJANGO_SETTINGS_MODULE', 'core.settings.local')
os.environ.setdefault('DJANGO_SETTINGS_MODULE', settings_module)

app = Celery('kirk')
app.config_from_object('django.conf:settings', namespace='CELERY')

app.autodiscover_tasks()
