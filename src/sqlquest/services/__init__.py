"""Service-layer utilities."""

from .pipeline import QuestPipeline

__all__ = ["QuestPipeline"]
