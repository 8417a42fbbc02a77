"""CLI utilities package."""

import json
from typing import Any, Optional


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def to_json(data: Any) -> str:
    """Pretty JSON for CLI output; non-JSON values (dates, paths) become strings."""
    return json.dumps(data, indent=2, default=str)
