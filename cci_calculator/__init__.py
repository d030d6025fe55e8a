"""
CCI Self-Assessment Calculator
==============================
Computes the SEBI CSCRF Cyber Capability Index from weighted control
parameters: overall score, maturity level, category breakdown and the
improvement areas with the largest potential gain.
"""

__version__ = "1.0.0"
