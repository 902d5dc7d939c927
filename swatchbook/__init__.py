"""swatchbook — render a labelled grid of colour swatches from a named-colour list."""

__version__ = '0.1.0'
