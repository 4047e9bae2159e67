"""
dataset — bundled sample snapshot.

Public API:
    from dataset import SAMPLE_SNAPSHOT
"""

import os

SAMPLE_SNAPSHOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data_sample.json")

__all__ = ["SAMPLE_SNAPSHOT"]
