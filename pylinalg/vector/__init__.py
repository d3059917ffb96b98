"""
Vector module.

Public API:
    Vector  - Dense vector with elementwise arithmetic, reductions
              (sum, mean, min, max, dot, norm) and mapping helpers
"""

from pylinalg.vector.dense import Vector

__all__ = [
    "Vector",
]
