"""
📦 Results - Ensamblado del payload de resultados y registros de respaldo
"""

import logging
from datetime import datetime
from typing import Dict, List

from .classifier import TARDE
from .data_parser import DataParser, NO_DISPONIBLE

logger = logging.getLogger(__name__)


def banca_placeholder(fecha: str, tipo_sorteo: str) -> Dict[str, str]:
    return {
        'fecha': fecha,
        'tipoSorteo': tipo_sorteo,
        'numero': NO_DISPONIBLE,
    }


def prize_placeholder(fecha: str, sorteo: str = 'Lotería Nacional') -> Dict[str, str]:
    return {
        'fecha': fecha,
        'sorteo': sorteo,
        'primerPremio': NO_DISPONIBLE,
        'segundoPremio': NO_DISPONIBLE,
        'tercerPremio': NO_DISPONIBLE,
    }


class ResultAssembler:
    """
    Acumulador de resultados de una página.

    Mantiene el orden de inserción de cada colección y aplica la síntesis
    de respaldo sólo cuando la página completa no produjo nada.
    """

    def __init__(self):
        self.tarde: List[Dict[str, str]] = []
        self.noche: List[Dict[str, str]] = []
        self.billetes_y_quinielas: List[Dict[str, str]] = []

    def add_banca(self, session_name: str, record: Dict[str, str]):
        if session_name == TARDE:
            self.tarde.append(record)
        else:
            self.noche.append(record)

    def add_prize(self, record: Dict[str, str]):
        self.billetes_y_quinielas.append(record)

    def is_empty(self) -> bool:
        return not (self.tarde or self.noche or self.billetes_y_quinielas)

    def apply_fallback(self, now: datetime) -> bool:
        """
        🩹 Sintetizar un registro 'No disponible' por colección si la página quedó vacía.

        Args:
            now: Momento de referencia para la fecha de los registros

        Returns:
            bool: True si se generaron registros de respaldo
        """
        if not self.is_empty():
            return False

        fecha = DataParser.format_short_date(now)
        self.tarde.append(banca_placeholder(fecha, 'Bancas (Tarde)'))
        self.noche.append(banca_placeholder(fecha, 'Bancas (Noche)'))
        self.billetes_y_quinielas.append(prize_placeholder(fecha))
        logger.warning("⚠️ No se encontraron sorteos - generados registros 'No disponible'")
        return True

    def payload(self) -> Dict:
        return {
            'bancas': {
                'tarde': list(self.tarde),
                'noche': list(self.noche),
            },
            'billetesYQuinielas': list(self.billetes_y_quinielas),
        }

    def summary(self) -> str:
        return (f"tarde={len(self.tarde)}, noche={len(self.noche)}, "
                f"billetesYQuinielas={len(self.billetes_y_quinielas)}")
