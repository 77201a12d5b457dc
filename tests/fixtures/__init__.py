"""Pytest fixture plugins for the mathexpr test suite."""
