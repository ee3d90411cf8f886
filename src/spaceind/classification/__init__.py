"""Classification of spaces transactions into history records."""

from spaceind.classification.classifier import classify_meta_output, classify_tx, locator_for

__all__ = [
    "classify_meta_output",
    "classify_tx",
    "locator_for",
]
