# env vars + constants
import logging
import os

NODE_ID = os.getenv("NODE_ID", "nodeX")
PORT = int(os.getenv("PORT", "8000"))

# fixed for the lifetime of the process
ADMIN_ID = os.getenv("ADMIN_ID", "admin")

OBSERVERS = [o.strip() for o in os.getenv("OBSERVERS", "").split(",") if o.strip()]
NOTIFY_TIMEOUT = float(os.getenv("NOTIFY_TIMEOUT", "1.5"))
# events beyond this backlog are dropped for observers (still in /events)
NOTIFY_QUEUE_SIZE = int(os.getenv("NOTIFY_QUEUE_SIZE", "1000"))


def log_level(value: str) -> str:
    value = value.strip().upper()
    if isinstance(logging.getLevelName(value), int):
        return value
    return "INFO"


LOG_LEVEL = log_level(os.getenv("LOG_LEVEL", "INFO"))
