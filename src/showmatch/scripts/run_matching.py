"""
Script para calcular matches sobre un dataset JSON.

Muestra las mejores propiedades para un cliente, o los clientes
que podrían estar interesados en una propiedad.

Uso:
    python -m showmatch.scripts.run_matching --data data/sample_dataset.json --client-id 1
    python -m showmatch.scripts.run_matching --data data/sample_dataset.json --property-id 5 --limit 10
"""

import argparse
import logging
import sys
from typing import Optional

import structlog

from showmatch.config import get_settings
from showmatch.matching import MatchingEngine
from showmatch.models import Dataset

logger = structlog.get_logger()


def configure_logging(level: Optional[str] = None):
    """Configura logging stdlib + structlog con salida de consola."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _format_match(label: str, match) -> str:
    line = f"{match.score:>3}  {match.recommendation:<16} {label}"
    if match.reasons:
        line += f"\n       + {'; '.join(match.reasons)}"
    if match.mismatches:
        line += f"\n       - {'; '.join(match.mismatches)}"
    return line


def run(
    data_path: str,
    client_id: Optional[str] = None,
    property_id: Optional[str] = None,
    limit: Optional[int] = None,
    min_score: Optional[int] = None,
) -> int:
    """Carga el dataset, calcula el ranking pedido y lo imprime."""
    dataset = Dataset.from_json_file(data_path)
    logger.info(
        "Dataset cargado",
        path=data_path,
        clients=len(dataset.clients),
        properties=len(dataset.properties),
        feedback=len(dataset.feedback),
    )

    engine = MatchingEngine()

    if client_id is not None:
        client = dataset.get_client(client_id)
        if client is None:
            raise LookupError(f"Cliente no encontrado: {client_id}")

        matches = engine.top_matches_for_client(
            client,
            dataset.properties,
            dataset.feedback,
            limit=limit,
            min_score=min_score,
        )
        print(f"\n=== TOP PROPIEDADES PARA {client.name} ===")
        for item in matches:
            print(_format_match(f"{item.property.address} (${item.property.price:,.0f})", item.match))
        logger.info("Matching completado", client_id=client.id, matches=len(matches))
        return 0

    prop = dataset.get_property(property_id)
    if prop is None:
        raise LookupError(f"Propiedad no encontrada: {property_id}")

    matches = engine.interested_clients_for_property(
        prop,
        dataset.clients,
        dataset.feedback,
        limit=limit,
        catalog=dataset.properties,
    )
    print(f"\n=== CLIENTES INTERESADOS EN {prop.address} ===")
    for item in matches:
        print(_format_match(item.client.name, item.match))
    logger.info("Matching completado", property_id=prop.id, matches=len(matches))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calcula matches cliente-propiedad sobre un dataset JSON"
    )
    parser.add_argument(
        "--data",
        required=True,
        help="Archivo JSON con clients, properties y feedback",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--client-id", help="Top de propiedades para este cliente")
    target.add_argument("--property-id", help="Clientes interesados en esta propiedad")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Máximo de resultados (default: DEFAULT_MATCH_LIMIT)",
    )
    parser.add_argument(
        "--min-score",
        type=int,
        default=None,
        help="Score mínimo para el top de propiedades (solo con --client-id)",
    )
    return parser


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.min_score is not None and args.property_id is not None:
        parser.error("--min-score solo aplica con --client-id")
    configure_logging()

    try:
        exit_code = run(
            data_path=args.data,
            client_id=args.client_id,
            property_id=args.property_id,
            limit=args.limit,
            min_score=args.min_score,
        )
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
