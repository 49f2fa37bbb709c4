"""Webhook client data models."""
