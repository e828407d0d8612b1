"""Cross-cutting configuration and wiring."""
