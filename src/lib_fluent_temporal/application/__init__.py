"""Application layer: ports and the evaluation use case."""
