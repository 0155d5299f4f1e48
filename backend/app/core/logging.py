# backend/app/core/logging.py
import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Appelé une seule fois au démarrage (main.py)."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format=LOG_FORMAT,
    )
    # httpx logue chaque requête en INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
