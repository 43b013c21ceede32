"""
Summary: Use cases for detecting, generating and loading sprites.
Why: Hold the filter logic independent of the pipeline and the process runner.
"""
