"""Encoders for compiled log documents."""
