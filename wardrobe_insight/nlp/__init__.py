"""LLM integrations."""
