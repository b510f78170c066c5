"""
Pricing Profiles Package

Select products, apply a price adjustment rule, preview the resulting
prices and save them as reusable named pricing profiles.
"""

__version__ = "1.0.0"
