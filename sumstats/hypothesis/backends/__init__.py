"""Computational backends for hypothesis tests."""
