"""
🎰 Section Extractor - Extracción de sorteos por secciones de la portada
Recorre los bloques de resultados y arma registros de bancas o de premios
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from . import selector_resolver as sel
from .classifier import classify, is_banca_style
from .data_parser import DataParser, NO_DISPONIBLE
from .document import DocumentNode
from .results import ResultAssembler

logger = logging.getLogger(__name__)

DEFAULT_TITLE = 'Sorteo'


class SectionExtractor:
    """
    Extractor de resultados agrupados por sección.

    Produce el payload {'bancas': {'tarde', 'noche'}, 'billetesYQuinielas'}
    a partir de un documento ya renderizado.
    """

    def __init__(self, section_selectors: Optional[List[str]] = None):
        self.section_selectors = section_selectors or sel.SECTION_SELECTORS
        self.data_parser = DataParser()

    # ═══════════════════════════════════════════════════════════════════
    # 🔄 ENTRADA PRINCIPAL
    # ═══════════════════════════════════════════════════════════════════

    def extract(self, document: DocumentNode, now: Optional[datetime] = None) -> Dict:
        """
        🎰 Extraer todos los sorteos del documento.

        Args:
            document: Documento renderizado
            now: Momento de referencia para fechas por defecto (default: ahora)

        Returns:
            dict: Payload ensamblado, nunca vacío
        """
        now = now or datetime.now()
        assembler = ResultAssembler()

        sections = sel.resolve(document, self.section_selectors)
        logger.info(f"📊 Encontradas {len(sections)} secciones de sorteo")

        for index, section in enumerate(sections):
            try:
                raw = self.read_raw_section(section, now)
                self._add_result(assembler, raw)
            except Exception as e:
                logger.warning(f"   ⚠️ Error procesando sección {index}: {e}")
                continue

        assembler.apply_fallback(now)
        logger.info(f"✅ Resultados: {assembler.summary()}")
        return assembler.payload()

    # ═══════════════════════════════════════════════════════════════════
    # 🔍 LECTURA DE SECCIONES
    # ═══════════════════════════════════════════════════════════════════

    def read_raw_section(self, section: DocumentNode, now: datetime) -> Dict:
        """
        Leer título, fecha y celdas candidatas de una sección.

        Returns:
            dict: {'title': str, 'dateText': str, 'cells': list[str], 'text': str}
        """
        title = self._scoped_text(section, sel.TITLE_SELECTOR, sel.ANCESTOR_TITLE_SELECTOR)
        date_text = self._scoped_text(section, sel.DATE_SELECTOR, sel.DATE_SELECTOR)

        try:
            cells = [cell.text.strip() for cell in section.select(sel.CELL_SELECTOR)]
        except Exception as e:
            logger.warning(f"   ⚠️ No se pudieron leer las celdas: {e}")
            cells = []

        return {
            'title': self.data_parser.clean_text(title, default=DEFAULT_TITLE),
            'dateText': self.data_parser.clean_text(date_text, default=DataParser.format_short_date(now)),
            'cells': cells,
            'text': section.text,
        }

    def _scoped_text(self, section: DocumentNode, selector: str,
                     ancestor_selector: str) -> str:
        try:
            element = section.select_one(selector)
            if element is None:
                ancestor = section.closest(sel.ANCESTOR_SECTION)
                if ancestor is not None:
                    element = ancestor.select_one(ancestor_selector)
            return element.text.strip() if element is not None else ''
        except Exception as e:
            logger.warning(f"   ⚠️ No se pudo leer '{selector}': {e}")
            return ''

    # ═══════════════════════════════════════════════════════════════════
    # 🏗️ CONSTRUCCIÓN DE REGISTROS
    # ═══════════════════════════════════════════════════════════════════

    def split_cells(self, title: str, cells: List[str]) -> Dict:
        """
        Repartir las celdas numéricas entre premios y la lista de números.

        En sorteos de bancas todas las celdas numéricas van a 'numeros'.
        En sorteos de premios las posiciones 0, 1 y 2 son 1er, 2do y 3er
        premio; el resto va a 'numeros'.
        """
        banca = is_banca_style(title)
        numeros = []
        premios = [NO_DISPONIBLE, NO_DISPONIBLE, NO_DISPONIBLE]

        for index, numero in enumerate(cells):
            if not self.data_parser.has_digits(numero):
                continue
            if banca or index > 2:
                numeros.append(numero)
            else:
                premios[index] = numero

        return {'numeros': numeros, 'premios': premios}

    def _add_result(self, assembler: ResultAssembler, raw: Dict):
        title = raw['title']
        split = self.split_cells(title, raw['cells'])
        numeros = split['numeros']

        if not numeros:
            numeros = self.data_parser.extract_digit_runs(raw['text'])

        classification = classify(title)
        if classification['isBancaStyle']:
            session_name = classification['session']
            assembler.add_banca(session_name, {
                'fecha': raw['dateText'],
                'tipoSorteo': title,
                'numero': ', '.join(numeros) or NO_DISPONIBLE,
            })
            logger.debug(f"   🎱 Banca ({session_name}): {title}")
        else:
            primer, segundo, tercero = split['premios']
            assembler.add_prize({
                'fecha': raw['dateText'],
                'sorteo': title,
                'primerPremio': primer,
                'segundoPremio': segundo,
                'tercerPremio': tercero,
            })
            if numeros:
                logger.debug(f"   🎟️ {title}: números adicionales {numeros}")
