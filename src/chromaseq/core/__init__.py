"""Inversion engine and discrepancy analyzer."""

from .analysis import compare_sequences, discrepancy, hex_collisions, mean_pairwise_distance, primary_stream
from .inversion import check_prediction, invert, invert_hex, invert_parallel

__all__ = [
    "check_prediction",
    "compare_sequences",
    "discrepancy",
    "hex_collisions",
    "invert",
    "invert_hex",
    "invert_parallel",
    "mean_pairwise_distance",
    "primary_stream",
]
