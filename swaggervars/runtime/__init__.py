"""Pipeline runtime: configuration loading and the two-pass replacer."""

from swaggervars.runtime.config_loader import load_replacer_config
from swaggervars.runtime.replacer import ProcessSummary, VariableReplacer

__all__ = ["ProcessSummary", "VariableReplacer", "load_replacer_config"]
