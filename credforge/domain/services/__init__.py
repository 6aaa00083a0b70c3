"""Domain services: strength scoring, key generation and credential flows."""
