"""Core domain: models, scope chain, compiler and Cloud Logging tables."""
