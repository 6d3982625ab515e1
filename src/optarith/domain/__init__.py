"""Backend-agnostic contracts for optarith."""
