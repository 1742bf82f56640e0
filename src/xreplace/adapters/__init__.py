"""Concrete port implementations backed by the filesystem and console."""
