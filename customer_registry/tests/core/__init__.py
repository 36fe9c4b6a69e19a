"""Unit tests for core domain logic.

These tests exercise the customer model and service without any
external dependencies.
"""
