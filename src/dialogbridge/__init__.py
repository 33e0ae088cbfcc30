"""Dialogue platform fulfillment webhook backed by an OpenAI-compatible chat model."""
