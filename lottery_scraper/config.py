"""
Configuración global del scraper de la Lotería Nacional.
"""

BASE_URL = "https://loterianacional.gob.do/"
BANCAS_URL = "https://loterianacional.gob.do/loterias/bancas"
BANCAS_PATH = "/loterias/bancas"

START_URLS = [BASE_URL]

# Navegador y crawl. max_concurrency=1 para no sobrecargar el sitio.
SCRAPER_CONFIG = {
    "headless": True,
    "slow_mo": 0,
    "navigation_timeout": 120000,  # ms
    "selector_timeout": 60000,  # ms - espera del selector principal, no es fatal
    "max_concurrency": 1,
    "max_requests_per_crawl": 10,
    "viewport": {"width": 1280, "height": 720},
    "screenshots": False,
    "screenshots_dir": "screenshots",
}

# Entrada por defecto (equivalente al input del actor)
DEFAULT_MAX_ITEMS = 100
DEFAULT_LOOKBACK_DAYS = 30

# Nodo de workflow
AGENT_DEFAULT_TIMEOUT = 30000  # ms
AGENT_OPERATION = "extractResults"

# Almacenamiento
STORAGE_DIR = "storage"
DEFAULT_DATASET = "default"
