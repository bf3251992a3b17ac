"""Data-access layer: one module per table, the only code that queries it."""
