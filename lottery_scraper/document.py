"""
🧩 Document - Interfaz mínima de consulta sobre el DOM renderizado
Los extractores sólo dependen de DocumentNode; SoupNode la implementa sobre BeautifulSoup
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class DocumentNode(ABC):
    """
    Nodo consultable del documento.

    Expone las únicas capacidades que usa la extracción:
    - select / select_one: consulta por selector CSS
    - text: texto del nodo (textContent)
    - closest: ancestro más cercano (incluyéndose) que cumple un selector
    """

    @abstractmethod
    def select(self, selector: str) -> List['DocumentNode']:
        """Todos los descendientes que cumplen el selector, en orden de documento."""

    @abstractmethod
    def select_one(self, selector: str) -> Optional['DocumentNode']:
        """Primer descendiente que cumple el selector o None."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Texto del nodo como textContent, sin espacios en los extremos."""

    @abstractmethod
    def closest(self, selector: str) -> Optional['DocumentNode']:
        """Nodo o ancestro más cercano que cumple el selector."""


class SoupNode(DocumentNode):
    """Adaptador de DocumentNode sobre un Tag de BeautifulSoup"""

    def __init__(self, tag: Tag):
        self.tag = tag

    def select(self, selector: str) -> List[DocumentNode]:
        return [SoupNode(t) for t in self.tag.select(selector)]

    def select_one(self, selector: str) -> Optional[DocumentNode]:
        found = self.tag.select_one(selector)
        return SoupNode(found) if found is not None else None

    @property
    def text(self) -> str:
        # Sin separador: <span>1<b>2</b></span> es "12"
        return self.tag.get_text().strip()

    def closest(self, selector: str) -> Optional[DocumentNode]:
        found = self.tag.css.closest(selector)
        return SoupNode(found) if found is not None else None

    def __repr__(self) -> str:
        return f"<SoupNode {self.tag.name}>"


def parse_html(html: str, parser: str = 'html.parser') -> DocumentNode:
    """
    🔧 Construir el documento consultable a partir del HTML renderizado.

    Args:
        html: HTML completo (p.ej. el resultado de page.content())
        parser: Parser de BeautifulSoup a usar

    Returns:
        DocumentNode raíz del documento
    """
    soup = BeautifulSoup(html or '', parser)
    logger.debug(f"📄 Documento parseado ({len(html or '')} caracteres)")
    return SoupNode(soup)
