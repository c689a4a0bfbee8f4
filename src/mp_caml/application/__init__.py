"""Application layer – query document generation."""
