"""
🤖 Lottery Agent - Variante para nodos de automatización de workflows
Procesa items de entrada y devuelve un item de salida por cada uno
"""

import logging
from typing import Callable, Dict, List, Optional

from . import selector_resolver as sel
from .browser_manager import BrowserManager
from .config import AGENT_DEFAULT_TIMEOUT, AGENT_OPERATION, BASE_URL
from .crawler import wait_for_selector_safely
from .document import parse_html
from .errors import AgentOperationError
from .section_extractor import SectionExtractor

logger = logging.getLogger(__name__)


class LotteryAgent:
    """
    Nodo 'Lottery Agent': extrae los resultados más recientes.

    Cada item de entrada admite:
        operation: 'extractResults'
        url: URL del sitio (default: portada)
        timeout: espera máxima del contenedor principal en ms
    """

    def __init__(self, browser_factory: Optional[Callable[[], BrowserManager]] = None):
        self.browser_factory = browser_factory or (lambda: BrowserManager(headless=True))
        self.section_extractor = SectionExtractor()

    async def execute(self, items: List[Dict], continue_on_fail: bool = False) -> List[Dict]:
        """
        🔄 Ejecutar el nodo sobre todos los items.

        Args:
            items: Parámetros de cada item
            continue_on_fail: Emitir un item de error en lugar de abortar

        Returns:
            list: [{'json': payload, 'pairedItem': {'item': i}}, ...]

        Raises:
            AgentOperationError: si un item falla y continue_on_fail es False
        """
        return_data = []

        for item_index, item in enumerate(items):
            try:
                payload = await self._run_item(item or {})
                return_data.append({
                    'json': payload,
                    'pairedItem': {'item': item_index},
                })
            except Exception as e:
                if continue_on_fail:
                    logger.warning(f"⚠️ Item {item_index} falló, se continúa: {e}")
                    return_data.append({
                        'json': {'error': str(e)},
                        'pairedItem': {'item': item_index},
                    })
                    continue
                raise AgentOperationError(str(e), item_index=item_index) from e

        return return_data

    async def _run_item(self, item: Dict) -> Dict:
        operation = item.get('operation', AGENT_OPERATION)
        if operation != AGENT_OPERATION:
            raise ValueError(f"Operación no soportada: {operation}")

        url = item.get('url') or BASE_URL
        timeout = int(item.get('timeout') or AGENT_DEFAULT_TIMEOUT)

        browser = self.browser_factory()
        await browser.setup()
        try:
            page = await browser.new_page()
            await page.goto(url, wait_until='networkidle')
            if not await wait_for_selector_safely(page, sel.HOME_WAIT_SELECTOR, timeout):
                logger.info("No se encontró el contenedor principal")
            html = await page.content()
            return self.section_extractor.extract(parse_html(html))
        finally:
            await browser.cleanup()
