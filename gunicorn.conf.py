# gunicorn -c gunicorn.conf.py hello_server.wsgi:app
from hello_server.config import get_settings

_settings = get_settings()

bind = f"{_settings.HOST}:{_settings.PORT}"
workers = _settings.WORKERS
accesslog = "-"
loglevel = _settings.log_level.lower()
