"""
Utilitaires partages pour les commandes CLI de CineStream.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
"""

from contextlib import contextmanager
from functools import wraps

from dependency_injector import providers
from loguru import logger as loguru_logger
from rich.console import Console

from cinestream.adapters.cli.notifier import ConsoleNotifier
from cinestream.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinestream")
    try:
        yield
    finally:
        loguru_logger.enable("cinestream")


def with_container(notify: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les clients HTTP du container sont fermes a la fin de la commande.

    Args:
        notify: Si True (defaut), les notifications sont affichees dans la console.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if notify:
                container.notifier.override(providers.Object(ConsoleNotifier(console)))
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.catalog_client().close()
                await container.stream_client().close()
        return wrapper
    return decorator

