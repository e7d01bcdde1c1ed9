"""PyWebview desktop shell hosting the research UI."""
