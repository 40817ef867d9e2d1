"""
🎯 Selector Resolver - Cadenas de selectores de respaldo
Prueba selectores en orden de prioridad y devuelve el primero con resultados
"""

import logging
from typing import List, Sequence

from .document import DocumentNode

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# 📋 LISTAS DE PRIORIDAD
# ═══════════════════════════════════════════════════════════════════

# Bloques de sorteo en la portada
SECTION_SELECTORS = [
    '.sorteo-section',
    '.resultados-section',
    '.numeros-section',
    'table',
]

TITLE_SELECTOR = 'h2, h3, .titulo-sorteo, .titulo, caption'
ANCESTOR_TITLE_SELECTOR = 'h2, h3, .titulo-sorteo'
DATE_SELECTOR = '.fecha-sorteo, .date'
CELL_SELECTOR = '.numero-ganador, .bola, .numero, td'
ANCESTOR_SECTION = 'section'

# Filas de la tabla de bancas
ROW_SELECTORS = [
    '.table-responsive table tbody tr',
    'table tbody tr',
    '.lottery-results tr',
    '.results-container tr',
]

ROW_DATE_SELECTORS = ['td:nth-child(1)', 'td:first-child']
ROW_TARDE_SELECTOR = 'td:nth-child(2)'
ROW_NOCHE_SELECTOR = 'td:nth-child(3)'

# Espera previa a la extracción (Playwright)
HOME_WAIT_SELECTOR = '.container'
BANCAS_WAIT_SELECTOR = 'table, .lottery-results, .results-table'


def resolve(document: DocumentNode, candidates: Sequence[str]) -> List[DocumentNode]:
    """
    🔍 Resolver la primera estrategia de selector con coincidencias.

    Args:
        document: Documento o nodo sobre el que consultar
        candidates: Selectores en orden de prioridad

    Returns:
        list: Nodos del primer selector con al menos una coincidencia, o []
    """
    for selector in candidates:
        logger.debug(f"   🔍 Probando selector: {selector}")
        nodes = document.select(selector)
        if nodes:
            logger.info(f"   ✅ {len(nodes)} nodos con selector: {selector}")
            return nodes

    logger.warning(f"⚠️ Ningún selector produjo resultados: {list(candidates)}")
    return []


def resolve_one(node: DocumentNode, candidates: Sequence[str]):
    """Primer nodo encontrado probando los selectores en orden, o None."""
    for selector in candidates:
        found = node.select_one(selector)
        if found is not None:
            return found
    return None
