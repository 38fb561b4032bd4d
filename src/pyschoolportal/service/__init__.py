"""Backend service clients."""
