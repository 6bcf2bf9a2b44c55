"""Application layer orchestrating domain rules and persistence."""
