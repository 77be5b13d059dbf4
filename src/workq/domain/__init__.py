"""Domain layer — work items, the shared container, and lifetime accounting.

This layer depends only on stdlib.
It must never import from services, plugins, output, commands, or config,
and it never logs: the only reporting channel is ``describe()``.
"""
