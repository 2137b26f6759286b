"""
Responsive Image Sets

Named sets of pre-sized image renditions keyed by CSS media queries,
rendered as <picture> markup for templates.
"""

__version__ = "0.1.0"
