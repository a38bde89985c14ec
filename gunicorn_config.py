"""
Gunicorn config: bind to 0.0.0.0 and PORT for Railway/Render.
Run with: gunicorn -c gunicorn_config.py app:app
"""
import os

bind = "0.0.0.0:{}".format(os.environ.get("PORT", "8080"))
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
threads = int(os.environ.get("GUNICORN_THREADS", "2"))
timeout = 60
accesslog = "-"
errorlog = "-"
