"""
Data package for the Namma Metro route finder.

Holds network_index.json, which lists line files in build order, and the
per-line station sequences under lines/.
"""
