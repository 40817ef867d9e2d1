"""
📊 Data Parser - Parsing y normalización de datos de sorteos
Fechas con formatos en orden de prioridad, filtro por rango y tokens numéricos
"""

import re
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

NO_DISPONIBLE = 'No disponible'

# (nombre legible, formato strptime) en orden de prioridad.
# Fechas ambiguas como 03/04/2024 se resuelven por este orden.
DATE_FORMATS: List[Tuple[str, str]] = [
    ('DD/MM/YYYY', '%d/%m/%Y'),
    ('YYYY-MM-DD', '%Y-%m-%d'),
    ('MM/DD/YYYY', '%m/%d/%Y'),
    ('DD-MM-YYYY', '%d-%m-%Y'),
]

DATE_TOKEN_PATTERN = re.compile(r'\d{1,4}[/-]\d{1,2}[/-]\d{1,4}')
NUMBER_SEPARATORS = re.compile(r'[-,\s]+')
DIGIT_RUN = re.compile(r'\d+')


class DataParser:
    """Parser de textos de sorteos (fechas, números, rangos)"""

    @staticmethod
    def parse_date(text: str, formats: Sequence[Tuple[str, str]] = DATE_FORMATS) -> Optional[date]:
        """
        Parsear la fecha de una fila probando los formatos en orden.

        Devuelve la primera interpretación válida; si el texto completo no
        parsea se reintenta con el primer token con forma de fecha.

        Args:
            text: Texto de la celda de fecha
            formats: Pares (nombre, formato strptime) en orden de prioridad

        Returns:
            date or None

        Examples:
            >>> DataParser.parse_date("01/02/2023")
            datetime.date(2023, 2, 1)
            >>> DataParser.parse_date("03/15/2024")
            datetime.date(2024, 3, 15)
        """
        if not text:
            return None

        candidates = [text.strip()]
        token = DATE_TOKEN_PATTERN.search(text)
        if token and token.group(0) != candidates[0]:
            candidates.append(token.group(0))

        for candidate in candidates:
            for name, fmt in formats:
                try:
                    parsed = datetime.strptime(candidate, fmt).date()
                    logger.debug(f"📅 '{text}' interpretada como {name}")
                    return parsed
                except ValueError:
                    continue

        return None

    @staticmethod
    def parse_iso_date(text: str) -> date:
        """
        Parsear una fecha de configuración (YYYY-MM-DD).

        Raises:
            ValueError: si el texto no es una fecha ISO válida
        """
        return datetime.strptime(text.strip(), '%Y-%m-%d').date()

    @staticmethod
    def is_within_range(value: date, start: date, end: date) -> bool:
        """Rango inclusivo en ambos extremos."""
        return start <= value <= end

    @staticmethod
    def split_numbers(text: str) -> List[str]:
        """
        Separar una celda de números por guiones, comas o espacios.

        Examples:
            >>> DataParser.split_numbers("12-34-56")
            ['12', '34', '56']
            >>> DataParser.split_numbers("  ")
            []
        """
        if not text:
            return []
        return [token for token in NUMBER_SEPARATORS.split(text.strip()) if token.strip()]

    @staticmethod
    def has_digits(text: str) -> bool:
        return bool(text) and DIGIT_RUN.search(text) is not None

    @staticmethod
    def extract_digit_runs(text: str) -> List[str]:
        """
        Todas las secuencias de dígitos en orden de aparición.

        Examples:
            >>> DataParser.extract_digit_runs("Loteka 05 - 17 - 33")
            ['05', '17', '33']
        """
        if not text:
            return []
        return DIGIT_RUN.findall(text)

    @staticmethod
    def format_short_date(value: datetime) -> str:
        """
        Fecha corta por defecto (M/D/YYYY, sin ceros a la izquierda).

        Examples:
            >>> DataParser.format_short_date(datetime(2024, 3, 5))
            '3/5/2024'
        """
        return f"{value.month}/{value.day}/{value.year}"

    @staticmethod
    def clean_text(text: str, default: str = NO_DISPONIBLE) -> str:
        """Colapsar espacios; texto vacío devuelve el valor por defecto."""
        if not text:
            return default
        cleaned = ' '.join(text.strip().split())
        return cleaned or default
