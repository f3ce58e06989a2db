"""Core infrastructure: configuration, logging and the metric registry."""
