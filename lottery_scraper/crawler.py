"""
🕷️ Lottery Crawler - Orquestación del recorrido de páginas
Navega cada URL, enruta según el tipo de página y envía los resultados al dataset
"""

import asyncio
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from . import selector_resolver as sel
from .browser_manager import BrowserManager
from .config import BANCAS_PATH, DEFAULT_MAX_ITEMS, SCRAPER_CONFIG
from .dataset import JsonDataset
from .document import parse_html
from .errors import PageLoadError
from .row_extractor import RowExtractor
from .section_extractor import SectionExtractor

logger = logging.getLogger(__name__)


async def wait_for_selector_safely(page, selector: str, timeout: int) -> bool:
    """
    ⏳ Esperar un selector sin abortar la página si no aparece.

    Returns:
        bool: True si el selector apareció antes del timeout
    """
    try:
        await page.wait_for_selector(selector, timeout=timeout)
        return True
    except PlaywrightTimeoutError as e:
        logger.warning(f"⚠️ No se encontró el selector esperado '{selector}': {e}")
        return False


def failed_page_record(url: str, error: Exception) -> Dict[str, str]:
    return {
        'url': url,
        'error': str(error),
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }


def is_bancas_page(url: str) -> bool:
    return BANCAS_PATH in url


class LotteryCrawler:
    """
    Crawler de resultados de la Lotería Nacional.

    Responsabilidades:
    - Navegación con Playwright (concurrencia configurable, 1 por defecto)
    - Enrutado: página de bancas -> registros por fecha; resto -> secciones
    - Registro de páginas fallidas en el dataset sin detener el recorrido
    """

    def __init__(self, dataset: JsonDataset, start_date: date, end_date: date,
                 max_items: int = DEFAULT_MAX_ITEMS, config: Optional[Dict] = None,
                 browser_manager: Optional[BrowserManager] = None):
        self.config = {**SCRAPER_CONFIG, **(config or {})}
        if self.config['max_concurrency'] < 1:
            raise ValueError(f"max_concurrency debe ser positivo: {self.config['max_concurrency']}")
        self.dataset = dataset
        self.start_date = start_date
        self.end_date = end_date
        self.max_items = max_items
        self.browser_manager = browser_manager or BrowserManager(
            headless=self.config['headless'],
            slow_mo=self.config['slow_mo'],
            navigation_timeout=self.config['navigation_timeout'],
            viewport=self.config['viewport'],
        )
        self.section_extractor = SectionExtractor()
        self.stats = {'processed': 0, 'failed': 0, 'records': 0}

    # ═══════════════════════════════════════════════════════════════════
    # 🔄 RECORRIDO
    # ═══════════════════════════════════════════════════════════════════

    async def run(self, urls: List[str]) -> Dict[str, int]:
        """
        🔄 Procesar todas las URLs.

        Args:
            urls: URLs iniciales

        Returns:
            dict: Estadísticas {'processed', 'failed', 'records'}
        """
        limit = self.config['max_requests_per_crawl']
        if len(urls) > limit:
            logger.warning(f"⚠️ {len(urls)} URLs, se procesarán sólo {limit}")
        urls = urls[:limit]

        logger.info(f"🚀 INICIANDO RECORRIDO DE {len(urls)} PÁGINAS")
        logger.info(f"   📅 Rango: {self.start_date} a {self.end_date}, máx. {self.max_items} registros")

        self.browser_manager.check_system_resources()
        semaphore = asyncio.Semaphore(self.config['max_concurrency'])

        await self.browser_manager.setup()
        try:
            await asyncio.gather(*(self._visit(url, semaphore) for url in urls))
        finally:
            await self.browser_manager.cleanup()

        logger.info("=" * 60)
        logger.info("🏁 RECORRIDO COMPLETADO")
        logger.info(f"   ✅ Páginas procesadas: {self.stats['processed']}")
        logger.info(f"   ❌ Páginas fallidas: {self.stats['failed']}")
        logger.info(f"   📊 Registros guardados: {self.stats['records']}")
        return dict(self.stats)

    async def _visit(self, url: str, semaphore: asyncio.Semaphore):
        async with semaphore:
            logger.info(f"🌐 Procesando {url}")
            page = None
            try:
                page = await self.browser_manager.new_page()
                await self._goto(page, url)
                await self.handle_page(page, url)
                self.stats['processed'] += 1
            except Exception as e:
                logger.error(f"❌ Request {url} falló: {e}")
                self.dataset.append(failed_page_record(url, e))
                self.stats['failed'] += 1
            finally:
                if page is not None:
                    await page.close()

    async def _goto(self, page, url: str):
        try:
            await page.goto(url, wait_until='networkidle',
                            timeout=self.config['navigation_timeout'])
        except PlaywrightTimeoutError as e:
            raise PageLoadError(url, str(e)) from e

    # ═══════════════════════════════════════════════════════════════════
    # 🧭 ENRUTADO DE PÁGINAS
    # ═══════════════════════════════════════════════════════════════════

    async def handle_page(self, page, url: str):
        """🧭 Esperar el contenido, capturar el HTML y extraer."""
        wait_selector = sel.BANCAS_WAIT_SELECTOR if is_bancas_page(url) else sel.HOME_WAIT_SELECTOR
        await wait_for_selector_safely(page, wait_selector, self.config['selector_timeout'])

        if self.config['screenshots']:
            await self._take_screenshot(page)

        html = await page.content()
        logger.info(f"📄 Contenido de la página: {len(html)} caracteres")

        self.process_html(url, html)

    def process_html(self, url: str, html: str,
                     now: Optional[datetime] = None) -> Union[Dict, List[Dict]]:
        """
        Extraer resultados del HTML renderizado y enviarlos al dataset.

        Returns:
            Payload de secciones (dict) o lista de registros por fecha
        """
        document = parse_html(html)

        if is_bancas_page(url):
            logger.info("🎱 Procesando página de bancas")
            extractor = RowExtractor(self.start_date, self.end_date, self.max_items)
            records = extractor.extract(document, url)
            if records:
                self.dataset.append(records)
                self.stats['records'] += len(records)
            else:
                logger.warning("⚠️ No se extrajeron resultados de lotería")
            return records

        logger.info("🎰 Procesando página de sorteos")
        payload = self.section_extractor.extract(document, now=now)
        self.dataset.append(payload)
        self.stats['records'] += 1
        return payload

    async def _take_screenshot(self, page):
        screenshots_dir = Path(self.config['screenshots_dir'])
        screenshots_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        screenshot_path = screenshots_dir / f"debug_{timestamp}.png"
        await page.screenshot(path=str(screenshot_path))
        logger.info(f"📸 Screenshot guardado: {screenshot_path}")
