"""Bundled sample images."""
