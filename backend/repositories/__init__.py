"""Repositories package initialization."""

from backend.repositories.hackhive_repository import (
    HackhiveRepository,
    hackhive_repository,
)

__all__ = ["HackhiveRepository", "hackhive_repository"]
