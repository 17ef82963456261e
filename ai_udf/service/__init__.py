"""Outer service layer (command-line entry point)."""
