# topmark:header:start
#
#   project      : JsonScribe
#   file         : __init__.py
#   file_relpath : src/jsonscribe/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for JsonScribe."""
