"""
Contract model module.

The in-memory contract with its catalog-backed attributes and lazily
derived lifecycle attributes.
"""
from .contract import Contract
from .models import BarrierType, infer_barrier_type

__all__ = ["Contract", "BarrierType", "infer_barrier_type"]
