"""CLI command modules.

- build: Rendering a track into an output directory
- config: Configuration management
- outline: Markdown outline of a track
"""
