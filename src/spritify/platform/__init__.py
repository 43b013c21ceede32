"""Platform services shared by features."""
