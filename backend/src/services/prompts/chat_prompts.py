"""
Chat prompts for LLM interactions.
"""

CHAT_SYSTEM_PROMPT = "You are a helpful AI assistant."
