"""Shared models, data access and services for the shop API."""
