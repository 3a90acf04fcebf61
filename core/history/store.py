# ===============================
# core/history/store.py
# ===============================

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from config.params import StorageParams
from core.history.record import ValuationRecord

logger = logging.getLogger(__name__)


def serialize_records(records: Iterable[ValuationRecord]) -> list:
    return [{"data": r.date.isoformat(), "valor": r.value} for r in records]


def deserialize_records(raw) -> List[ValuationRecord]:
    """
    Converte a lista salva em registros.
    Qualquer item fora do formato {"data": "AAAA-MM-DD", "valor": número}
    gera ValueError.
    """
    if not isinstance(raw, list):
        raise ValueError(f"expected a list of records, got {type(raw).__name__}")

    records = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"invalid record: {item!r}")
        value = item.get("valor")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"invalid value in record: {item!r}")
        records.append(
            ValuationRecord(
                date=date.fromisoformat(str(item.get("data"))[:10]),
                value=float(value),
            )
        )
    return records


class HistoryStore:
    """
    Armazenamento local do histórico: um único documento JSON com uma chave
    (padrão "historicoValuation") contendo a lista completa.

    load() nunca falha: arquivo ausente ou conteúdo inválido -> lista vazia.
    save() sobrescreve o documento inteiro.
    """

    def __init__(self, path: Optional[Path] = None, key: Optional[str] = None):
        defaults = StorageParams()
        self.path = Path(path) if path is not None else defaults.path
        self.key = key or defaults.key

    @classmethod
    def from_params(cls, params: StorageParams) -> "HistoryStore":
        return cls(params.path, params.key)

    def load(self) -> List[ValuationRecord]:
        if not self.path.exists():
            logger.info("No history file at %s, starting empty", self.path)
            return []

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(document, dict) or self.key not in document:
                logger.info("Key %s not found in %s", self.key, self.path)
                return []
            records = deserialize_records(document[self.key])
        except (OSError, ValueError) as e:
            # json.JSONDecodeError também é ValueError
            logger.warning("Ignoring unreadable history in %s: %s", self.path, e)
            return []

        logger.info("Loaded %d valuation(s) from %s", len(records), self.path)
        return records

    def save(self, records: Iterable[ValuationRecord]) -> None:
        payload = serialize_records(records)
        text = json.dumps({self.key: payload}, ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # arquivo temporário no mesmo diretório + os.replace:
        # o documento antigo só é substituído quando o novo está completo
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Saved %d valuation(s) to %s", len(payload), self.path)

# ===============================
# END store.py
# ===============================
