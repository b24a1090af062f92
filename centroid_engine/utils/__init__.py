"""
Utility subpackage:
- config_loader   → YAML loader, JSON overrides & defaults
- logging_utils   → unified logger setup
"""
