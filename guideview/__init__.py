"""
guideview - terminal viewer for remotely hosted markdown guides
"""

__version__ = "0.3.0"
