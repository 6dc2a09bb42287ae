"""Core domain logic: exceptions, validation, ingestion and query."""
