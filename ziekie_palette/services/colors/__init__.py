"""
Ziekie Colors Module

Provides pixel sampling, quantization, vibrancy ranking, uniqueness
filtering and role assignment for artwork palettes.
"""
