"""Shared JSON and schema helpers."""
