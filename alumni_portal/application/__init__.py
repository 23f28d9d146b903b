"""Application layer orchestrating domain behaviour."""
