"""Analysis engine.

Pure functions of ``(ParsedTable, parameters)``; no I/O and no state between
calls. Every entry point returns a ``Result``.
"""
