"""Command line interface for spritify."""
