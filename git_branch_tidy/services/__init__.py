"""Services used by the reconciliation workflow."""
