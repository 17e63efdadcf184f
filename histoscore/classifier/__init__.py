"""Threshold classification of final scores."""

from histoscore.classifier.threshold import ThresholdClassifier, ThresholdTable

__all__ = ["ThresholdClassifier", "ThresholdTable"]
