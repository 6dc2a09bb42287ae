"""HTTP API for docchat."""
