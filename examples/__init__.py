"""Runnable examples for p2paddr."""
