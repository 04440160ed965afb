"""
Rendering package for plugin wrapper sources.

Turns a resolved GeneratedDescriptor into the Java source text the plugin
loader picks up.
"""
