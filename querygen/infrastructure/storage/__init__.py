"""Output sinks."""

from querygen.infrastructure.storage.output_sink import (
    DirectoryOutputSink,
    InMemoryOutputSink,
    OutputSink,
    write_statements,
)

__all__ = ["DirectoryOutputSink", "InMemoryOutputSink", "OutputSink", "write_statements"]
