"""
Gunicorn configuration file for production deployment.
Usage: gunicorn main:app -c gunicorn.conf.py
"""
from pathlib import Path

from framework.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Server
bind = settings.GUNICORN_BIND
backlog = 2048

# Worker processes; each worker owns its own engine and connection pool
workers = settings.GUNICORN_WORKERS
worker_class = "uvicorn.workers.UvicornWorker"
max_requests = 1000
max_requests_jitter = 50
timeout = 60
keepalive = 5
graceful_timeout = 30

proc_name = (settings.GUNICORN_PROC_NAME or settings.APP_NAME.lower().replace(" ", "-"))[:32]

# Logging
accesslog = str(LOG_DIR / "gunicorn_access.log")
errorlog = str(LOG_DIR / "gunicorn_error.log")
loglevel = settings.LOG_LEVEL.lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

daemon = False
pidfile = str(LOG_DIR / "gunicorn.pid")

# Not preloading: the async engine must be created inside each worker's event loop
preload_app = False

def when_ready(server):
    server.log.info("%s is ready. Listening on %s", settings.APP_NAME, server.address)

def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)

def on_exit(server):
    server.log.info("%s is shutting down.", settings.APP_NAME)
