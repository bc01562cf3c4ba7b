"""Dashboard pages rendered by the router."""
