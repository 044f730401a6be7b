"""
gravship
--------
Side-scrolling gravity flyer: a ship held aloft by thrust, pooled walls
scrolling over a panning background, drawn on composited layers.
"""

__version__ = "0.1.0"
