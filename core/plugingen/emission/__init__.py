"""
Output side of the generator: abstract sinks plus the emitter that writes
the two artifacts of every plugin (wrapper source, empty lang resource).
"""
