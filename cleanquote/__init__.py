"""Instant price quotes for residential and commercial cleaning."""
