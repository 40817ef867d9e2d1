"""
🗂️ Dataset - Almacén JSON de solo-anexado para los resultados
Un archivo JSON numerado por registro, leído en orden de inserción
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from .config import DEFAULT_DATASET, STORAGE_DIR

logger = logging.getLogger(__name__)


class JsonDataset:
    """Dataset en disco: storage/datasets/<nombre>/000000001.json, ..."""

    def __init__(self, name: str = DEFAULT_DATASET, storage_dir: str = STORAGE_DIR):
        self.name = name
        self.path = Path(storage_dir) / 'datasets' / name
        self.path.mkdir(parents=True, exist_ok=True)
        # Continuar tras el número más alto para no pisar registros si hay huecos
        self._count = max((int(p.stem) for p in self._record_files() if p.stem.isdigit()), default=0)

    def _record_files(self) -> List[Path]:
        return sorted(self.path.glob('*.json'))

    def __len__(self) -> int:
        return self._count

    def append(self, data: Union[Dict, List[Dict]]) -> int:
        """
        💾 Anexar un registro o una lista de registros.

        Args:
            data: dict o lista de dicts

        Returns:
            int: Número de registros escritos
        """
        records = data if isinstance(data, list) else [data]

        for record in records:
            if not isinstance(record, dict):
                raise TypeError(f"Registro no es un dict: {type(record).__name__}")
            self._count += 1
            record_file = self.path / f"{self._count:09d}.json"
            with open(record_file, 'w', encoding='utf-8') as f:
                json.dump(record, f, ensure_ascii=False, indent=2)

        logger.info(f"💾 {len(records)} registros guardados en dataset '{self.name}'")
        return len(records)

    def read_all(self) -> List[Dict]:
        """Todos los registros en orden de inserción."""
        records = []
        for record_file in self._record_files():
            try:
                with open(record_file, 'r', encoding='utf-8') as f:
                    records.append(json.load(f))
            except json.JSONDecodeError as e:
                logger.error(f"❌ Error decodificando JSON {record_file}: {e}")
        return records

    def export(self, output_file: str) -> str:
        """
        📤 Exportar el dataset completo como un único arreglo JSON.

        Returns:
            str: Ruta del archivo escrito
        """
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        records = self.read_all()

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(records, f, ensure_ascii=False, indent=2)

        logger.info(f"📤 Dataset exportado a: {output_path} ({len(records)} registros)")
        return str(output_path)
