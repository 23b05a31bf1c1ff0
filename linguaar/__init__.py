"""
LinguaAR - offline translations and focus handling for AR object detections
"""

__version__ = "0.1.0"
