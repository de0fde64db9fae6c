"""Classifier module for file metadata queries."""

from .classifier import FileClassifier

__all__ = [
    "FileClassifier",
]
