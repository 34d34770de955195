"""semgov command-line interface."""
