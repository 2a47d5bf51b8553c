"""
Gemini chat client package.

Provides:
- Credential loading from the process environment
- A single-turn exchanger for the Gemini generateContent API
- An interactive terminal loop (``gemini-chat``)
"""
