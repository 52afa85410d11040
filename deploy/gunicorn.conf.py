"""Gunicorn configuration for the deed trainer.

Usage:
    gunicorn main:app -c deploy/gunicorn.conf.py

Grading is CPU-light and request-scoped; the only blocking I/O is the
content probe (disk stat or S3 HEAD) while picking the next document.

The in-memory repositories are per process.  Run a single worker unless
the repositories are backed by a shared store.
"""

import os

# ─── Server socket ──────────────────────────────────────────────

bind = os.getenv("BIND", "0.0.0.0:10000")

# ─── Worker processes ───────────────────────────────────────────

workers = int(os.getenv("WORKERS", "1"))
worker_class = "uvicorn.workers.UvicornWorker"

# ─── Timeouts ───────────────────────────────────────────────────
#
# S3 HEAD requests retry up to 3 times; keep well above that.

timeout = 30
graceful_timeout = 15
keepalive = 5

# ─── Logging ────────────────────────────────────────────────────

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = "deed-trainer"


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting deed trainer: workers=%d, bind=%s", workers, bind)
