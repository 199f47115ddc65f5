"""Shared page chrome."""
