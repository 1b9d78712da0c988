"""Test fixtures and utilities for profit curve testing.

This module provides standardized data generation and assertion helpers
for consistent testing across all test modules.
"""

from .assertions import (
    assert_curves_identical,
    assert_monotonic_increase,
    assert_valid_confusion_counts,
    assert_valid_curve,
)
from .data_generators import (
    generate_scored_leads,
    generate_tied_scores,
    make_ranked_population,
)
