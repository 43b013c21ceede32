"""
Summary: Concrete adapters for the sprite feature ports.
Why: Keep subprocess and file access out of the use cases.
"""
