"""Serverless entry point package."""
