"""
Configuration du logging via loguru.

Deux sorties :
- stderr, colorée, au niveau choisi par la configuration ou les options -v/-q
- fichier JSON avec rotation, qui garde tous les niveaux (appels proxy en DEBUG)
"""

import sys
from pathlib import Path

from loguru import logger

_VERBOSE_LEVELS = ("INFO", "DEBUG", "TRACE")


def resolve_log_level(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau console effectif.

    -q force ERROR ; chaque -v descend d'un cran à partir de INFO.
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return base_level.upper()
    return _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinestream.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les handlers loguru de l'application.

    Args :
        log_level : Niveau minimum de la sortie console
        log_file : Fichier de log JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
