"""Base64 Service — HTTP API for base64 text encoding and decoding.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
