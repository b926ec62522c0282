"""Entites metier de MovieRate."""

from movierate.core.entities.movie import Movie

__all__ = ["Movie"]
