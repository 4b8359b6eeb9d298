"""Shared configuration, schemas and services for Starbook."""
