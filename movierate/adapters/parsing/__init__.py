"""Adaptateurs de parsing des noms de fichiers."""

from movierate.adapters.parsing.regex_parser import RegexFilenameParser

__all__ = ["RegexFilenameParser"]
