from .terminal import render_attempt, render_outcome, resolve_style, STYLES

__all__ = ["render_attempt", "render_outcome", "resolve_style", "STYLES"]
