"""Practice repositories."""

from app.repositories.practice.practice import PracticeRepository

__all__ = ["PracticeRepository"]
