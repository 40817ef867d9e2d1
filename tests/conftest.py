"""
🧪 Fixtures compartidas para tests del scraper
"""

import pytest
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock

from lottery_scraper.dataset import JsonDataset
from lottery_scraper.document import SoupNode, parse_html


class BrokenSelectorNode(SoupNode):
    """SoupNode que lanza al consultar un selector concreto (nodo desconectado)."""

    def __init__(self, tag, broken_selector):
        super().__init__(tag)
        self.broken_selector = broken_selector

    def _wrap(self, node):
        return BrokenSelectorNode(node.tag, self.broken_selector) if node is not None else None

    def select(self, selector):
        if selector == self.broken_selector:
            raise RuntimeError(f"selector roto: {selector}")
        return [self._wrap(n) for n in super().select(selector)]

    def select_one(self, selector):
        if selector == self.broken_selector:
            raise RuntimeError(f"selector roto: {selector}")
        return self._wrap(super().select_one(selector))

    def closest(self, selector):
        return self._wrap(super().closest(selector))


@pytest.fixture
def broken_document():
    """Fábrica de documentos cuyo selector indicado lanza una excepción."""
    def build(html, broken_selector):
        return BrokenSelectorNode(parse_html(html).tag, broken_selector)
    return build


@pytest.fixture
def fixed_now():
    """Momento fijo para fechas por defecto."""
    return datetime(2024, 3, 15, 18, 30)


@pytest.fixture
def march_range():
    """Rango de marzo 2024 (inclusive)."""
    return date(2024, 3, 1), date(2024, 3, 31)


@pytest.fixture
def dataset(tmp_path):
    """Dataset JSON temporal."""
    return JsonDataset(name='test', storage_dir=str(tmp_path / 'storage'))


@pytest.fixture
def home_html():
    """Portada con un sorteo de bancas por tanda y un sorteo de premios."""
    return """
    <html><body><div class="container">
      <div class="sorteo-section">
        <h3>Loteka Tarde</h3>
        <span class="fecha-sorteo">15-03-2024</span>
        <span class="bola">05</span><span class="bola">17</span><span class="bola">33</span>
      </div>
      <div class="sorteo-section">
        <h3>Leidsa Noche</h3>
        <span class="fecha-sorteo">15-03-2024</span>
        <span class="bola">41</span><span class="bola">08</span><span class="bola">62</span>
      </div>
      <div class="sorteo-section">
        <h2>Lotería Nacional Gana Más</h2>
        <span class="fecha-sorteo">15-03-2024</span>
        <span class="numero">10</span><span class="numero">20</span>
        <span class="numero">30</span><span class="numero">40</span>
      </div>
    </div></body></html>
    """


@pytest.fixture
def bancas_html():
    """Tabla de bancas con cabecera y una fila de datos."""
    return """
    <html><body>
      <table><tbody>
        <tr><th>Fecha</th><th>Tarde</th><th>Noche</th></tr>
        <tr><td>15/03/2024</td><td>12-34-56</td><td>78-90-01</td></tr>
      </tbody></table>
    </body></html>
    """


@pytest.fixture
def empty_html():
    """Página sin secciones reconocibles."""
    return "<html><body><p>Sin resultados por ahora</p></body></html>"


@pytest.fixture
def mock_playwright_page():
    """Mock de página de Playwright."""
    page = AsyncMock()
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.screenshot = AsyncMock()
    page.close = AsyncMock()
    page.url = "https://loterianacional.gob.do/"
    page.content = AsyncMock(return_value="<html></html>")
    page.on = MagicMock()
    return page


@pytest.fixture
def mock_browser_manager(mock_playwright_page):
    """Mock de BrowserManager que entrega siempre la misma página."""
    manager = MagicMock()
    manager.setup = AsyncMock()
    manager.cleanup = AsyncMock()
    manager.new_page = AsyncMock(return_value=mock_playwright_page)
    manager.check_system_resources = MagicMock()
    return manager
