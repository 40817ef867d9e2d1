"""
📅 Row Extractor - Resultados de bancas por fecha y tanda
Lee las filas de la tabla, filtra por rango de fechas y respeta el máximo de registros
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from . import selector_resolver as sel
from .classifier import NOCHE, TARDE
from .data_parser import DataParser
from .document import DocumentNode

logger = logging.getLogger(__name__)


class RowExtractor:
    """
    Extractor de registros {date, drawTime, numbers, sourceUrl}.

    Cada fila aporta hasta dos registros: tanda de la tarde (2da columna)
    y de la noche (3ra columna).
    """

    def __init__(self, start_date: date, end_date: date, max_items: int = 100,
                 row_selectors: Optional[List[str]] = None):
        """
        Args:
            start_date: Inicio del rango (inclusive)
            end_date: Fin del rango (inclusive)
            max_items: Máximo de registros a emitir por página
            row_selectors: Selectores de filas en orden de prioridad
        """
        if max_items < 1:
            raise ValueError(f"max_items debe ser positivo: {max_items}")
        self.start_date = start_date
        self.end_date = end_date
        self.max_items = max_items
        self.row_selectors = row_selectors or sel.ROW_SELECTORS
        self.data_parser = DataParser()

    def extract(self, document: DocumentNode, source_url: str) -> List[Dict]:
        """
        📅 Extraer los registros de la página en orden de documento.

        Args:
            document: Documento renderizado
            source_url: URL de origen que se copia en cada registro

        Returns:
            list: Registros DatedDrawRecord (como mucho max_items)
        """
        logger.info(f"📅 Extrayendo resultados entre {self.start_date} y {self.end_date}")
        results: List[Dict] = []

        rows = sel.resolve(document, self.row_selectors)
        if not rows:
            logger.warning("⚠️ No se encontraron filas con los selectores probados")
            return results

        for row in rows:
            if len(results) >= self.max_items:
                break
            try:
                for record in self._process_row(row, source_url):
                    if len(results) >= self.max_items:
                        break
                    results.append(record)
            except Exception as e:
                logger.warning(f"   ⚠️ Error procesando fila: {e}")
                continue

        logger.info(f"✅ Extraídos {len(results)} resultados")
        return results

    def _process_row(self, row: DocumentNode, source_url: str) -> List[Dict]:
        date_cell = sel.resolve_one(row, sel.ROW_DATE_SELECTORS)
        if date_cell is None:
            logger.warning("   ⚠️ No se pudo extraer la fecha de la fila")
            return []

        date_text = date_cell.text.strip()
        draw_date = self.data_parser.parse_date(date_text)
        if draw_date is None:
            logger.warning(f"   ⚠️ Formato de fecha inválido: {date_text}")
            return []

        if not self.data_parser.is_within_range(draw_date, self.start_date, self.end_date):
            return []

        records = []
        for draw_time, selector in ((TARDE, sel.ROW_TARDE_SELECTOR), (NOCHE, sel.ROW_NOCHE_SELECTOR)):
            numbers = self._read_numbers(row, selector, draw_time)
            if any(self.data_parser.has_digits(n) for n in numbers):
                records.append({
                    'date': draw_date.isoformat(),
                    'drawTime': draw_time,
                    'numbers': numbers,
                    'sourceUrl': source_url,
                })
        return records

    def _read_numbers(self, row: DocumentNode, selector: str, draw_time: str) -> List[str]:
        try:
            cell = row.select_one(selector)
            if cell is None:
                logger.warning(f"   ⚠️ No se encontraron números de la {draw_time.lower()}")
                return []
            return self.data_parser.split_numbers(cell.text)
        except Exception as e:
            logger.warning(f"   ⚠️ Error leyendo números de la {draw_time.lower()}: {e}")
            return []
