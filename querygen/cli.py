"""Command-line entry point - generates a batch and writes the statement files."""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from querygen.config.settings import Settings
from querygen.data.table import generate_random_table
from querygen.errors import CatalogConfigError, GenerationError
from querygen.infrastructure.storage.output_sink import DirectoryOutputSink
from querygen.keywords.loader import load_keyword_catalog
from querygen.statements.batch import StatementGenerator

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="querygen",
        description="Generate paired Postgres/BigQuery statements for differential testing",
    )
    parser.add_argument("--count", type=int, help="Number of statements to generate")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--output", type=str, help="Output directory")
    parser.add_argument("--config-dir", type=str, help="Directory with the dialect config JSON files")
    parser.add_argument("--columns", type=int, help="Columns in the generated table")
    parser.add_argument("--rows", type=int, help="Rows in the generated table")
    parser.add_argument("--workers", type=int, help="Worker threads for batch generation")
    parser.add_argument(
        "--abort-on-error",
        action="store_true",
        help="Stop at the first statement that fails instead of skipping it",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        "statement_count": args.count,
        "random_seed": args.seed,
        "output_dir": args.output,
        "config_dir": args.config_dir,
        "table_column_count": args.columns,
        "table_row_count": args.rows,
        "max_workers": args.workers,
        "abort_on_error": True if args.abort_on_error else None,
    }
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid arguments: %s", e)
        return 1

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        catalog = load_keyword_catalog(settings=settings)
    except (FileNotFoundError, CatalogConfigError, GenerationError) as e:
        logger.error("Could not load dialect config: %s", e)
        return 1

    rng = np.random.default_rng(settings.random_seed)
    table = generate_random_table(
        settings.table_column_count,
        row_count=settings.table_row_count,
        rng=rng,
        name_length=settings.random_string_length,
    )
    logger.info("Generating %s statement(s) for table %s", settings.statement_count, table.name)

    try:
        generator = StatementGenerator(catalog, [table], settings=settings)
        batch = generator.run(DirectoryOutputSink(Path(settings.output_dir)), rng=rng)
    except GenerationError as e:
        logger.error("Generation aborted: %s", e)
        return 1

    logger.info("Generated %s statement(s), %s failed", batch.size, len(batch.errors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
