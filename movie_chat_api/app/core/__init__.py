"""Configuration, logging, database handle and error types."""
