"""Capability interfaces and their models."""
