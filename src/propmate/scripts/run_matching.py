"""
Script para rankear matches desde un export JSON del CRM.

El export es un objeto con las listas "properties" y "clients" (también
acepta las claves que usa el front: "propmate_properties" y
"propmate_clients"). Imprime los matches en JSON por stdout.

Uso:
    python -m propmate.scripts.run_matching --data export.json --client-id c-001
    python -m propmate.scripts.run_matching --data export.json --property-id p-001 --top 5
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from propmate.exceptions import PropmateError
from propmate.log import configure_logging
from propmate.matching import MatchingEngine
from propmate.models import LeadStage, PropertyStatus

logger = structlog.get_logger()

_KEYS = {
    "properties": ("properties", "propmate_properties"),
    "clients": ("clients", "propmate_clients"),
}


def load_export(path: Path) -> dict[str, list[dict[str, Any]]]:
    """Lee el export y devuelve {"properties": [...], "clients": [...]}."""
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise PropmateError(f"Export must be a JSON object: {path}")

    records: dict[str, list[dict[str, Any]]] = {}
    for name, keys in _KEYS.items():
        records[name] = []
        for key in keys:
            value = data.get(key)
            if isinstance(value, str):
                # localStorage guarda las listas serializadas
                value = json.loads(value)
            if isinstance(value, list):
                records[name] = value
                break
    return records


def _find(records: list[dict[str, Any]], record_id: str, kind: str) -> dict[str, Any]:
    for record in records:
        if not isinstance(record, dict):
            continue
        if str(record.get("id")) == record_id:
            return record
    raise PropmateError(f"{kind} not found: {record_id}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rankea matches cliente ↔ propiedad")
    parser.add_argument("--data", required=True, type=Path, help="Export JSON del CRM")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--client-id", help="Rankear propiedades para este cliente")
    target.add_argument("--property-id", help="Rankear clientes para esta propiedad")
    parser.add_argument("--min-score", type=int, default=None, help="Score mínimo (0-100)")
    parser.add_argument("--top", type=int, default=None, help="Cantidad máxima de resultados")
    parser.add_argument(
        "--available-only",
        action="store_true",
        help="Solo propiedades en estado Available",
    )
    parser.add_argument(
        "--match-transaction",
        action="store_true",
        help="Descartar pares con tipo de operación distinto",
    )
    parser.add_argument(
        "--skip-closed",
        action="store_true",
        help="Ignorar clientes en etapa Closed o Lost",
    )
    return parser


def run(args: argparse.Namespace) -> list[dict[str, Any]]:
    overrides: dict[str, Any] = {
        "match_transaction_type": args.match_transaction,
    }
    if args.min_score is not None:
        overrides["min_score"] = args.min_score
    if args.top is not None:
        overrides["top_n"] = args.top
    if args.available_only:
        overrides["statuses"] = frozenset({PropertyStatus.AVAILABLE})
    if args.skip_closed:
        overrides["exclude_lead_stages"] = frozenset({LeadStage.CLOSED, LeadStage.LOST})

    engine = MatchingEngine.from_settings(**overrides)
    records = load_export(args.data)

    if args.client_id:
        client = _find(records["clients"], args.client_id, "Client")
        matches = engine.rank_for_client(client, records["properties"])
    else:
        prop = _find(records["properties"], args.property_id, "Property")
        matches = engine.rank_for_property(prop, records["clients"])

    return [match.to_display_dict() for match in matches]


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        results = run(args)
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except (PropmateError, OSError, json.JSONDecodeError, ValueError) as e:
        logger.error("Error en matching", error=str(e))
        sys.exit(1)

    print(json.dumps(results, indent=2, ensure_ascii=False))
    logger.info("Matching completado", matches=len(results))


if __name__ == "__main__":
    main()
