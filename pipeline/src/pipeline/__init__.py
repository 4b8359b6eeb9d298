"""Batch generation pipeline for Starbook."""
