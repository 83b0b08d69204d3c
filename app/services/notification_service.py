# /app/services/notification_service.py

"""
Outbound notifications. These run as background tasks after the response has
been sent, so nothing here may raise back into the request that scheduled it.
"""

import logging
import threading
import time

from ..core import config

logger = logging.getLogger(__name__)


def send_welcome_email(username: str) -> None:
    logger.info("Attempting to send welcome email to: %s", username)
    try:
        # Stand-in for the mail provider round trip.
        time.sleep(config.WELCOME_EMAIL_DELAY_SECONDS)
        logger.info(
            "Successfully sent welcome email to: %s. Thread: %s",
            username, threading.current_thread().name,
        )
    except Exception:
        logger.exception("Sending welcome email to %s failed", username)
