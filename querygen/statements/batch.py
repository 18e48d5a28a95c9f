"""Batch statement generation."""

import logging
import time
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, Field

from querygen.config.constants import Dialect
from querygen.config.settings import Settings, get_settings
from querygen.data.table import Table
from querygen.errors import GenerationError, InvalidArgumentError
from querygen.infrastructure.logging.logger import StructuredLogger
from querygen.keywords.catalog import KeywordCatalog
from querygen.statements.assembler import RenderedStatement, StatementAssembler
from querygen.statements.template import DEFAULT_SHAPES, StatementShape, build_template
from querygen.tokens.generator import TokenGenerator
from querygen.utils.randomness import get_random_element, get_rng

if TYPE_CHECKING:
    from querygen.infrastructure.storage.output_sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedStatement:
    """One logical statement rendered for every dialect."""

    shape: str
    table_name: str
    statements: dict[Dialect, RenderedStatement]


class StatementBatch(BaseModel):
    """Index-aligned statement lists, one entry per successfully built statement."""

    bigquery_skeletons: list[str] = Field(default_factory=list)
    bigquery_tokenized: list[str] = Field(default_factory=list)
    postgres_skeletons: list[str] = Field(default_factory=list)
    postgres_tokenized: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.postgres_tokenized)

    def add(self, statement: GeneratedStatement) -> None:
        bigquery = statement.statements[Dialect.BIGQUERY]
        postgres = statement.statements[Dialect.POSTGRES]
        self.bigquery_skeletons.append(bigquery.skeleton)
        self.bigquery_tokenized.append(bigquery.tokenized)
        self.postgres_skeletons.append(postgres.skeleton)
        self.postgres_tokenized.append(postgres.tokenized)

    def as_outputs(self) -> dict[str, list[str]]:
        """The four lists keyed the way the output files are labelled."""
        return {
            "BQ_skeletons": self.bigquery_skeletons,
            "BQ_tokenized": self.bigquery_tokenized,
            "Postgre_skeletons": self.postgres_skeletons,
            "Postgre_tokenized": self.postgres_tokenized,
        }


class StatementGenerator:
    """Generates batches of statements for both dialects."""

    def __init__(
        self,
        catalog: KeywordCatalog,
        tables: Sequence[Table],
        shapes: Sequence[StatementShape] = DEFAULT_SHAPES,
        settings: Settings | None = None,
    ):
        if not tables:
            raise InvalidArgumentError("At least one table is required")
        self.catalog = catalog
        self.tables = list(tables)
        self.settings = settings or get_settings()
        self.assembler = StatementAssembler(catalog)
        self.structured_logger = StructuredLogger(__name__)

        self.shapes = [shape for shape in shapes if shape.is_available(catalog)]
        skipped = [shape.name for shape in shapes if shape not in self.shapes]
        if skipped:
            logger.warning("Skipping shapes with disabled required features: %s", skipped)
        if not self.shapes:
            raise InvalidArgumentError("No statement shape has all of its required features enabled")

    def generate_statement(
        self,
        rng: np.random.Generator | None = None,
        shape: StatementShape | None = None,
        table: Table | None = None,
    ) -> GeneratedStatement:
        """Build one statement and render it for every dialect.

        Raises:
            GenerationError: If any construct or keyword of the statement fails.
        """
        rng = rng if rng is not None else get_rng()
        shape = shape or get_random_element(self.shapes, rng)
        table = table or get_random_element(self.tables, rng)

        template = build_template(shape, self.catalog, rng)
        generator = TokenGenerator(
            table, self.catalog, rng, default_bound=self.settings.default_count_bound
        )
        rendered = generator.generate_tokens(template.token_infos)
        statements = self.assembler.assemble(template, rendered)
        return GeneratedStatement(shape=shape.name, table_name=table.name, statements=statements)

    def _generate_isolated(self, index: int, rng: np.random.Generator) -> GeneratedStatement | GenerationError:
        shape = get_random_element(self.shapes, rng)
        table = get_random_element(self.tables, rng)
        try:
            return self.generate_statement(rng, shape=shape, table=table)
        except GenerationError as e:
            if self.settings.abort_on_error:
                raise
            self.structured_logger.log_error(
                "generate_statement",
                e,
                {"index": index, "shape": shape.name, "table": table.name},
            )
            return e

    def generate_batch(
        self,
        count: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> StatementBatch:
        """Generate ``count`` statements.

        Each statement draws from its own child generator, so the batch is the
        same for a given seed whatever the worker count. A failing statement is
        logged and left out (or re-raised when abort_on_error is set).
        """
        count = self.settings.statement_count if count is None else count
        if count < 0:
            raise InvalidArgumentError(f"Statement count cannot be negative, got {count}")
        rng = rng if rng is not None else get_rng()
        child_rngs = rng.spawn(count)

        start = time.time()
        if self.settings.max_workers > 1 and count > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
                results = list(pool.map(self._generate_isolated, range(count), child_rngs))
        else:
            results = [self._generate_isolated(i, child) for i, child in enumerate(child_rngs)]
        elapsed_ms = (time.time() - start) * 1000

        batch = StatementBatch()
        shapes: Counter[str] = Counter()
        for result in results:
            if isinstance(result, GenerationError):
                batch.errors.append(f"{type(result).__name__}: {result}")
            else:
                batch.add(result)
                shapes[result.shape] += 1

        self.structured_logger.log_step(
            "generate_batch",
            {
                "requested": count,
                "generated": batch.size,
                "failed": len(batch.errors),
                "shapes": dict(shapes),
                "tables": [table.name for table in self.tables],
            },
            duration_ms=elapsed_ms,
        )
        return batch

    def run(
        self,
        sink: "OutputSink",
        count: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> StatementBatch:
        """Generate a batch and hand it to the sink."""
        batch = self.generate_batch(count, rng)
        sink.write(batch)
        return batch
