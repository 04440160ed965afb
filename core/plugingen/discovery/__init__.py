"""
Discovery of declared modules.

Stands in for the build's annotation scan: declarations are read from a
YAML manifest and handed to the generator as one GenerationRound.
"""
