"""User interfaces for spritify."""
