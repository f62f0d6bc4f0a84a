"""
Request building, signing and the generic verb-shaped API surface.
"""
