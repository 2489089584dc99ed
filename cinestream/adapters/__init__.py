"""Adaptateurs : implementations concretes des ports (HTTP, stockage, CLI)."""
