# topmark:header:start
#
#   project      : YamlScribe
#   file         : __main__.py
#   file_relpath : src/yamlscribe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running YamlScribe via ``python -m yamlscribe``.

It delegates directly to :func:`yamlscribe.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how YamlScribe is launched.

Examples:
    Render a JSON document::

        python -m yamlscribe render workflow.json
"""

from __future__ import annotations

from yamlscribe.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
