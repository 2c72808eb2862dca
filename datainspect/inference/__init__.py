# ==============================================
# TOPIC 1: INFERENCE
# ==============================================
#
# This package decides what a single raw text value looks like
# BEFORE it is folded into any column statistics.
#
# Modules:
# --------
# - value_classifier.py  → Lexical category of a raw value
#                          (integer / float / boolean / string)
#
# ==============================================

from .value_classifier import ValueCategory, ValueClassifier, classify, parse_float

__all__ = ["ValueCategory", "ValueClassifier", "classify", "parse_float"]
