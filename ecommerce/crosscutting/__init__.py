"""Cross-cutting concerns: configuration, structured logging, typed errors."""
