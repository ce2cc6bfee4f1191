"""User-facing interfaces built on the metadata model."""
