"""Infrastructure layer - config, logging, metrics, tracing and wiring."""
