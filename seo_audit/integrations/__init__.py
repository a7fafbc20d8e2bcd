"""External services: page fetching and LLM-backed rewrite suggestions."""
