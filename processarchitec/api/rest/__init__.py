"""REST API for workflow generation."""
