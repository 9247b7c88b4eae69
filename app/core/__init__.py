"""Core shiritori rules (kana normalization, randomness port, turn resolution).

Kept free of FastAPI and LINE concerns so it can be reused by API routes, CLI, and tests.
"""
