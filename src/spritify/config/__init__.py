"""Configuration loading and path policy for spritify."""
