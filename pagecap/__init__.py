"""
pagecap - browser screenshot and interaction actions run in disposable containers
"""

__version__ = "0.1.0"
