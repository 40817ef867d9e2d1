"""
🎰 SCRAPER DE RESULTADOS - LOTERÍA NACIONAL DOMINICANA
Recorre las páginas de resultados y guarda los registros en un dataset JSON.

Uso:
python -m lottery_scraper --url https://loterianacional.gob.do/loterias/bancas \
    --start-date 2024-03-01 --end-date 2024-03-31 --max-items 50
"""

import argparse
import asyncio
import json
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Optional

from .config import DEFAULT_LOOKBACK_DAYS, DEFAULT_MAX_ITEMS, SCRAPER_CONFIG, START_URLS, STORAGE_DIR
from .crawler import LotteryCrawler
from .data_parser import DataParser
from .dataset import JsonDataset

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extrae resultados de la Lotería Nacional Dominicana.")
    parser.add_argument('--url', action='append', dest='urls',
                        help="URL a procesar (repetible). Default: portada.")
    parser.add_argument('--input', type=str, help="Archivo JSON de entrada (startUrls, startDate, endDate, maxItems).")
    parser.add_argument('--start-date', type=str, help="Fecha inicial YYYY-MM-DD (default: hace 30 días).")
    parser.add_argument('--end-date', type=str, help="Fecha final YYYY-MM-DD (default: hoy).")
    parser.add_argument('--max-items', type=int, help=f"Máximo de registros por página (default: {DEFAULT_MAX_ITEMS}).")
    parser.add_argument('--max-concurrency', type=int, default=SCRAPER_CONFIG['max_concurrency'],
                        help="Páginas en paralelo (default: 1).")
    parser.add_argument('--storage-dir', type=str, default=STORAGE_DIR, help="Directorio del dataset.")
    parser.add_argument('--export', type=str, help="Exportar el dataset a este archivo JSON al terminar.")
    parser.add_argument('--headed', action='store_true', help="Mostrar el navegador.")
    parser.add_argument('--screenshots', action='store_true', help="Guardar screenshots de depuración.")
    return parser


def load_input(input_file: Optional[str]) -> Dict:
    """📂 Leer el input JSON (formato del actor) si se indicó uno."""
    if not input_file:
        return {}
    with open(Path(input_file), 'r', encoding='utf-8') as f:
        data = json.load(f)
    logger.info(f"📂 Input cargado desde: {input_file}")
    return data or {}


def resolve_options(args: argparse.Namespace, input_data: Dict, today: Optional[date] = None) -> Dict:
    """
    Combinar flags, input JSON y valores por defecto.

    Los flags tienen prioridad sobre el input JSON.
    """
    today = today or date.today()

    urls: List[str] = args.urls or [
        entry['url'] if isinstance(entry, dict) else entry
        for entry in input_data.get('startUrls', [])
    ] or list(START_URLS)

    start_text = args.start_date or input_data.get('startDate')
    end_text = args.end_date or input_data.get('endDate')
    start_date = DataParser.parse_iso_date(start_text) if start_text else today - timedelta(days=DEFAULT_LOOKBACK_DAYS)
    end_date = DataParser.parse_iso_date(end_text) if end_text else today

    max_items = args.max_items
    if max_items is None:
        max_items = input_data.get('maxItems')
    max_items = int(max_items) if max_items is not None else DEFAULT_MAX_ITEMS
    if max_items < 1:
        raise ValueError(f"maxItems debe ser un entero positivo: {max_items}")

    return {
        'urls': urls,
        'start_date': start_date,
        'end_date': end_date,
        'max_items': max_items,
    }


async def main(args: argparse.Namespace):
    """🎯 Función principal"""
    logger.info("🎰 SCRAPER LOTERÍA NACIONAL DOMINICANA")
    logger.info("=" * 60)

    options = resolve_options(args, load_input(args.input))
    logger.info(f"📅 Resultados desde {options['start_date']} hasta {options['end_date']}, "
                f"máx. {options['max_items']} registros")

    dataset = JsonDataset(storage_dir=args.storage_dir)
    crawler = LotteryCrawler(
        dataset=dataset,
        start_date=options['start_date'],
        end_date=options['end_date'],
        max_items=options['max_items'],
        config={
            'headless': not args.headed,
            'max_concurrency': args.max_concurrency,
            'screenshots': args.screenshots,
        },
    )

    await crawler.run(options['urls'])

    if args.export:
        dataset.export(args.export)

    logger.info("🎉 Scraping finalizado")


def run():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    args = build_parser().parse_args()
    try:
        asyncio.run(main(args))
    except KeyboardInterrupt:
        logger.info("🛑 Programa interrumpido")


if __name__ == "__main__":
    run()
