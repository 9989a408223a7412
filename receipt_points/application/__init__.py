"""Application workflows that orchestrate domain and runtime code."""
