"""
Primary Category: designate one category per content item as its primary one.
"""
__version__ = "0.1.0"
