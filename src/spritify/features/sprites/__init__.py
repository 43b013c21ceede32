"""
Summary: Sprite generation feature package.
Why: Group directive parsing, cache checks and tool invocation behind one filter.
"""
