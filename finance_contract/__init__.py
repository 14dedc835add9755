"""
Finance Contract - single option contract model and shortcode codec

Models a single financial options contract (binary and vanilla options on an
underlying asset), encodes it into its compact shortcode form, decodes
shortcodes back into construction parameters and derives the time-based
lifecycle attributes used by pricing.
"""

__version__ = "0.1.0"
__author__ = "Finance Contract Team"
