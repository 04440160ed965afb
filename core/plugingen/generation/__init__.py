"""
Plugin descriptor generation layer.

Includes option resolution, dependency merging, naming conventions and the
PluginGenerationService that drives one element at a time through
resolve -> merge -> derive -> render -> emit.
"""
