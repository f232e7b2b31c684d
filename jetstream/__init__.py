"""
jetstream
~~~~~~~~~
TV-style movie browsing app: a read-only catalog, a small TV widget
theme, and Qt screens tied together by a back-stack navigator.
"""

__version__ = "0.1.0"
