"""
🌐 Browser Manager - Gestión del navegador Playwright
Lanza Chromium headless, crea páginas y libera recursos
"""

import logging
from typing import Optional

import psutil
from playwright.async_api import async_playwright

from .config import SCRAPER_CONFIG

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    '--disable-dev-shm-usage',
    '--disable-setuid-sandbox',
    '--no-sandbox',
    '--disable-gpu',
    '--disable-web-security',
    '--disable-features=IsolateOrigins,site-per-process',
]


class BrowserManager:
    """Gestor del navegador Playwright"""

    def __init__(self, headless: bool = True, slow_mo: int = 0,
                 navigation_timeout: int = SCRAPER_CONFIG['navigation_timeout'],
                 viewport: Optional[dict] = None):
        """
        Inicializar gestor del navegador.

        Args:
            headless: Ejecutar en modo headless
            slow_mo: Retardo entre acciones en ms
            navigation_timeout: Timeout por defecto de navegación (ms)
            viewport: Tamaño de la ventana {'width', 'height'}
        """
        self.playwright = None
        self.browser = None
        self.context = None
        self.headless = headless
        self.slow_mo = slow_mo
        self.navigation_timeout = navigation_timeout
        self.viewport = viewport or SCRAPER_CONFIG['viewport']

    def check_system_resources(self):
        """🔍 Verificar memoria disponible antes de lanzar Chromium"""
        memory = psutil.virtual_memory()
        available_gb = memory.available / (1024**3)
        logger.info(f"💾 Memoria disponible: {available_gb:.1f}GB")

        if memory.available < 1024 * 1024 * 1024:  # 1GB
            logger.warning("⚠️ Poca memoria disponible (<1GB)")

    async def setup(self):
        """🚀 Lanzar navegador y contexto"""
        logger.info("🚀 Configurando navegador...")

        try:
            self.playwright = await async_playwright().start()

            logger.info(f"🔧 Configuración: headless={self.headless}, slow_mo={self.slow_mo}ms")

            self.browser = await self.playwright.chromium.launch(
                headless=self.headless,
                args=BROWSER_ARGS,
                slow_mo=self.slow_mo,
            )

            self.context = await self.browser.new_context(
                viewport=self.viewport,
                ignore_https_errors=True,
                extra_http_headers={
                    'Accept-Language': 'es-DO,es;q=0.9,en;q=0.8',
                },
            )
            self.context.set_default_timeout(self.navigation_timeout)
            self.context.set_default_navigation_timeout(self.navigation_timeout)

            logger.info("✅ Navegador configurado exitosamente")
            return self.context

        except Exception as e:
            logger.error(f"❌ Error configurando navegador: {e}")
            await self.cleanup()
            raise

    async def new_page(self):
        """📄 Nueva página en el contexto actual"""
        if self.context is None:
            raise RuntimeError("El navegador no está configurado: llamar a setup() primero")

        page = await self.context.new_page()
        page.on("pageerror", lambda err: logger.debug(f"🚨 Error JS: {err}"))
        return page

    async def cleanup(self):
        """🧹 Limpieza de recursos del navegador"""
        logger.info("🧹 Limpiando recursos del navegador...")

        try:
            if self.context:
                await self.context.close()
                logger.info("   ✅ Contexto cerrado")

            if self.browser:
                await self.browser.close()
                logger.info("   ✅ Navegador cerrado")

            if self.playwright:
                await self.playwright.stop()
                logger.info("   ✅ Playwright detenido")

        except Exception as e:
            logger.warning(f"⚠️ Error durante limpieza: {e}")
        finally:
            self.context = None
            self.browser = None
            self.playwright = None

        logger.info("✅ Limpieza completada")

    async def __aenter__(self):
        await self.setup()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.cleanup()
