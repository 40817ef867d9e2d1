"""
🏷️ Classifier - Reglas de clasificación por título de sorteo
Coincidencia por subcadena sobre el título en minúsculas (no tokenizada)
"""

TARDE = 'Tarde'
NOCHE = 'Noche'

BANCA_MARKERS = ('banca', 'loteka', 'leidsa')
TARDE_MARKERS = ('tarde', 'primera', '1ra')


def is_banca_style(title: str) -> bool:
    """
    Indica si el sorteo se publica como lista de números (bancas).

    Examples:
        >>> is_banca_style("Loteka Quiniela")
        True
        >>> is_banca_style("Lotería Nacional - Gana Más")
        False
    """
    lowered = (title or '').lower()
    return any(marker in lowered for marker in BANCA_MARKERS)


def session(title: str) -> str:
    """
    Tanda del sorteo de bancas. Sin marcador de tarde se asume Noche.

    Examples:
        >>> session("Banca Primera Tanda")
        'Tarde'
        >>> session("Leidsa")
        'Noche'
    """
    lowered = (title or '').lower()
    if any(marker in lowered for marker in TARDE_MARKERS):
        return TARDE
    return NOCHE


def classify(title: str) -> dict:
    """Clasificación completa: {'isBancaStyle': bool, 'session': 'Tarde'|'Noche'}"""
    return {
        'isBancaStyle': is_banca_style(title),
        'session': session(title),
    }
