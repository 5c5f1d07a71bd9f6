"""Rule catalog and line matcher for leaksniff."""

from .rules import RULES, Rule, get_rule
from .matcher import detect_secrets_in_text, normalize_path

__all__ = ["RULES", "Rule", "get_rule", "detect_secrets_in_text", "normalize_path"]
