# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for YamlScribe (Click-based)."""
