"""Core ftmi logic: prefix inference and the rename ledger."""
