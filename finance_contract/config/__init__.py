"""
Configuration module.

Frozen-dataclass defaults, YAML loading with precedence and validation of
the contract type catalog.
"""
