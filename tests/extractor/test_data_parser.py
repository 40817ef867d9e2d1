"""
🧪 Tests para DataParser
"""

import pytest
from datetime import date, datetime
from lottery_scraper.data_parser import DataParser, DATE_FORMATS, NO_DISPONIBLE


class TestDataParser:
    """Suite de tests para DataParser."""

    # ═══════════════════════════════════════════════════════════════
    # TESTS: parse_date
    # ═══════════════════════════════════════════════════════════════

    def test_parse_date_day_first_has_priority(self):
        """Test: 01/02/2023 se interpreta como DD/MM/YYYY (1 de febrero)."""
        result = DataParser.parse_date("01/02/2023")

        assert result == date(2023, 2, 1)

    def test_parse_date_iso(self):
        """Test: Formato YYYY-MM-DD."""
        assert DataParser.parse_date("2024-03-15") == date(2024, 3, 15)

    def test_parse_date_month_first_when_day_first_fails(self):
        """Test: 03/15/2024 no es DD/MM válido y cae en MM/DD/YYYY."""
        assert DataParser.parse_date("03/15/2024") == date(2024, 3, 15)

    def test_parse_date_dashes_day_first(self):
        """Test: Formato DD-MM-YYYY."""
        assert DataParser.parse_date("15-03-2024") == date(2024, 3, 15)

    def test_parse_date_ambiguous_resolved_by_priority(self):
        """Test: Fecha ambigua se resuelve por el orden de formatos, no por contenido."""
        assert DataParser.parse_date("03/04/2024") == date(2024, 4, 3)

    def test_parse_date_custom_format_order(self):
        """Test: El orden de formatos es configurable."""
        month_first = [('MM/DD/YYYY', '%m/%d/%Y'), ('DD/MM/YYYY', '%d/%m/%Y')]

        assert DataParser.parse_date("03/04/2024", month_first) == date(2024, 3, 4)

    def test_parse_date_with_surrounding_text(self):
        """Test: Se toma el primer token con forma de fecha."""
        assert DataParser.parse_date("Viernes 15/03/2024 (Tarde)") == date(2024, 3, 15)

    def test_parse_date_strips_whitespace(self):
        """Test: Espacios alrededor no impiden el parseo."""
        assert DataParser.parse_date("  15/03/2024\n") == date(2024, 3, 15)

    def test_parse_date_invalid_returns_none(self):
        """Test: Texto sin fecha retorna None."""
        assert DataParser.parse_date("Fecha") is None
        assert DataParser.parse_date("32/13/2024") is None

    def test_parse_date_empty(self):
        """Test: None o vacío retorna None."""
        assert DataParser.parse_date(None) is None
        assert DataParser.parse_date('') is None

    def test_date_formats_priority_order(self):
        """Test: Orden fijo de formatos."""
        assert [name for name, _ in DATE_FORMATS] == [
            'DD/MM/YYYY', 'YYYY-MM-DD', 'MM/DD/YYYY', 'DD-MM-YYYY'
        ]

    # ═══════════════════════════════════════════════════════════════
    # TESTS: parse_iso_date / is_within_range
    # ═══════════════════════════════════════════════════════════════

    def test_parse_iso_date_valid(self):
        """Test: Fecha de configuración ISO."""
        assert DataParser.parse_iso_date("2024-03-01") == date(2024, 3, 1)

    def test_parse_iso_date_invalid_raises(self):
        """Test: Fecha de configuración inválida lanza ValueError."""
        with pytest.raises(ValueError):
            DataParser.parse_iso_date("01/03/2024")

    @pytest.mark.parametrize("value,expected", [
        (date(2024, 3, 1), True),
        (date(2024, 3, 31), True),
        (date(2024, 3, 15), True),
        (date(2024, 2, 29), False),
        (date(2024, 4, 1), False),
    ])
    def test_is_within_range_inclusive(self, value, expected):
        """Test: Los extremos del rango se incluyen; un día fuera se excluye."""
        assert DataParser.is_within_range(value, date(2024, 3, 1), date(2024, 3, 31)) is expected

    # ═══════════════════════════════════════════════════════════════
    # TESTS: números
    # ═══════════════════════════════════════════════════════════════

    def test_split_numbers_dashes(self):
        """Test: Separar por guiones."""
        assert DataParser.split_numbers("12-34-56") == ['12', '34', '56']

    def test_split_numbers_mixed_separators(self):
        """Test: Guiones, comas y espacios combinados."""
        assert DataParser.split_numbers(" 05, 17 - 33  48 ") == ['05', '17', '33', '48']

    def test_split_numbers_empty(self):
        """Test: Celda vacía retorna lista vacía."""
        assert DataParser.split_numbers('') == []
        assert DataParser.split_numbers('   ') == []
        assert DataParser.split_numbers(None) == []

    def test_has_digits(self):
        """Test: Detectar dígitos."""
        assert DataParser.has_digits('Premio 1') is True
        assert DataParser.has_digits('Pendiente') is False
        assert DataParser.has_digits('') is False

    def test_extract_digit_runs_in_order(self):
        """Test: Todas las secuencias de dígitos en orden de aparición."""
        assert DataParser.extract_digit_runs("Ganadores: 11 y 22, luego 033") == ['11', '22', '033']

    def test_extract_digit_runs_no_digits(self):
        """Test: Sin dígitos retorna lista vacía."""
        assert DataParser.extract_digit_runs("Sin resultados") == []

    # ═══════════════════════════════════════════════════════════════
    # TESTS: formato y limpieza
    # ═══════════════════════════════════════════════════════════════

    def test_format_short_date(self):
        """Test: Fecha corta sin ceros a la izquierda."""
        assert DataParser.format_short_date(datetime(2024, 3, 5, 10, 0)) == '3/5/2024'

    def test_clean_text_collapses_spaces(self):
        """Test: Colapsar espacios."""
        assert DataParser.clean_text('  Loteka   Tarde ') == 'Loteka Tarde'

    def test_clean_text_empty_returns_sentinel(self):
        """Test: Texto vacío retorna 'No disponible'."""
        assert DataParser.clean_text('') == NO_DISPONIBLE
        assert DataParser.clean_text(None) == NO_DISPONIBLE
        assert DataParser.clean_text('   ', default='Sorteo') == 'Sorteo'
