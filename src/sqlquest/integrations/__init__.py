"""Concrete TextGenerationService implementations."""
