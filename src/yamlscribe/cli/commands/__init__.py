# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the YamlScribe CLI."""
