"""Boundary adapters: storage backends and model providers."""
