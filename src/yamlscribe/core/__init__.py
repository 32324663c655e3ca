# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer core: Value Tree nodes, classifier, scalar rendering and emitter.

Modules here depend only on `yamlscribe.constants` and the low-level
`yamlscribe.config.logging` / `yamlscribe.config.types` modules; they never
import the CLI.
"""
