"""Command-line host for entityscope."""
