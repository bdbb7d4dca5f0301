"""Application layer – export use cases."""
