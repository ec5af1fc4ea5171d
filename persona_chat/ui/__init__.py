"""NiceGUI interface - thin visualization layer for persona chats.

Responsibilities:
    - Persona picker landing page
    - Chat transcript, loading indicator and input form
    - Static statistics dashboard beside the chat

Contains minimal business logic. Replies are requested through the API.
"""
