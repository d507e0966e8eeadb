"""Weighted prize wheel: catalog loading, selection and spin history."""
