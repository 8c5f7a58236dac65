"""Utility helpers for the Upstash Kafka client."""
