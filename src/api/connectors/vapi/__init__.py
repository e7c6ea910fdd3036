"""Connector do assistente de voz (tool calls via webhook)."""
