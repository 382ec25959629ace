"""Infrastructure adapters.

Adapters implement protocols defined in core/protocols/.
Each adapter wraps an external system (an analytics provider, a log sink).
"""
