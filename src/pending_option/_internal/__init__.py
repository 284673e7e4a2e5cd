"""Internal helpers: settlement normalization and the single-settlement cell."""
