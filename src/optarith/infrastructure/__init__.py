"""Concrete arithmetic behavior for optarith."""
