"""
TAL device page strategies.

Loads per-device JSON configuration and resolves the page strategy elements
(doctype, mimetype, root element, <head> and <body> markup) a device needs.
"""

__version__ = "1.0.0"
