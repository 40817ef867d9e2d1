"""
🎰 Lottery Scraper Package - Extracción de resultados de la Lotería Nacional Dominicana
Estructura modular: consulta del DOM, clasificación, extracción y persistencia
"""

from .classifier import NOCHE, TARDE, is_banca_style, session
from .data_parser import DataParser, NO_DISPONIBLE
from .dataset import JsonDataset
from .document import DocumentNode, SoupNode, parse_html
from .results import ResultAssembler
from .row_extractor import RowExtractor
from .section_extractor import SectionExtractor
from .selector_resolver import resolve
# BrowserManager, LotteryCrawler y LotteryAgent se importan desde sus módulos (requieren Playwright)

__all__ = [
    'NOCHE',
    'TARDE',
    'is_banca_style',
    'session',
    'DataParser',
    'NO_DISPONIBLE',
    'JsonDataset',
    'DocumentNode',
    'SoupNode',
    'parse_html',
    'ResultAssembler',
    'RowExtractor',
    'SectionExtractor',
    'resolve',
]
