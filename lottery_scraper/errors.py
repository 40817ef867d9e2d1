"""
Excepciones del scraper.

La extracción nunca lanza por datos ausentes; estas excepciones cubren
fallos de carga de página y del nodo de workflow.
"""

from typing import Optional


class ScraperError(Exception):
    """Error base del scraper."""


class PageLoadError(ScraperError):
    """La página no pudo cargarse (navegación o timeout)."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message


class AgentOperationError(ScraperError):
    """Fallo operativo del nodo de workflow, asociado al item de entrada."""

    def __init__(self, message: str, item_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.item_index = item_index
