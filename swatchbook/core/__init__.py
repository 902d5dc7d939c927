"""swatchbook.core — Foundation layer.

Contains the colour-space model, sequencing, contrast selection, text fitting,
entry loading, configuration and report builder.
This module has NO dependencies on swatchbook.sequencers or swatchbook.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
