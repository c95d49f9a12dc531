"""
AgriFin - Source Package

Dynamic translation for a farmers' income/expense tracker.

DESIGN PRINCIPLES:
1. Translation is an enhancement, never a blocking dependency
2. The caller only ever receives a string
3. One provider call per distinct (text, language), then cache
4. Every fallback is logged with its reason
"""

__version__ = "1.0.0"
__author__ = "AgriFin Team"
