"""Embedded datasets bundled with tzpocket."""
