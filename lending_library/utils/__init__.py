"""Input validation and output helpers for the Library CLI."""
