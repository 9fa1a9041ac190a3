"""Rasterization and geometry helpers. No engine state."""
