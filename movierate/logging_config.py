"""
Configuration du logging de MovieRate via loguru.

Deux sorties :
- stderr : lignes courtes et colorees pour suivre un scan ou le serveur
- fichier : une ligne JSON par evenement, avec rotation et compression zip
"""

import sys
from typing import Optional

from loguru import logger

from movierate.config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings, log_level: Optional[str] = None) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        settings : Parametres de logging (niveau, fichier, rotation, retention)
        log_level : Niveau console impose par la ligne de commande (-v / -q),
            prioritaire sur settings.log_level
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level or settings.log_level,
        format=_CONSOLE_FORMAT,
        colorize=True,
    )

    # Le fichier garde tout, y compris les requetes API en DEBUG
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )
