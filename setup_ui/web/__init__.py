"""
Server-side markup helpers: the rendering context and navigation widgets.
"""
