"""Application layer: use cases orchestrating domain ports."""
