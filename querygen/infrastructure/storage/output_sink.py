"""Output sinks for generated statement batches."""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from querygen.config.constants import OUTPUT_FILES
from querygen.statements.batch import StatementBatch

logger = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Accepts finished batches of index-aligned statements."""

    def write(self, batch: StatementBatch) -> None: ...


class DirectoryOutputSink:
    """Writes each statement list to its own file, one statement per line."""

    def __init__(self, output_dir: str | Path):
        """Initialize the sink.

        Args:
            output_dir: Directory for the output files. Created on first write.
        """
        self.output_dir = Path(output_dir)

    def write(self, batch: StatementBatch) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for field_name, file_name in OUTPUT_FILES.items():
            write_statements(getattr(batch, field_name), self.output_dir / file_name)
        logger.info("The output is stored at %s", self.output_dir)


class InMemoryOutputSink:
    """Keeps written batches in memory."""

    def __init__(self) -> None:
        self.batches: list[StatementBatch] = []

    def write(self, batch: StatementBatch) -> None:
        self.batches.append(batch)


def write_statements(statements: list[str], output_path: Path) -> None:
    """Write statements to a file, newline-terminated."""
    with open(output_path, "w", encoding="utf-8") as f:
        for statement in statements:
            f.write(statement)
            f.write("\n")
