# Path: scripts/__init__.py
# Purpose: Package initializer for command-line tools.
# Layer: scripts.
# Details: Modules here expose main() entry points declared in pyproject.toml.
