"""Application layer: use-case orchestration over storage and core logic."""
