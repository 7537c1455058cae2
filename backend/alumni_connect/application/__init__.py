"""
APPLICATION LAYER - Use cases

Commands change state (resolve a conversation, send a message); queries read
it (list conversations, load a thread). Handlers receive repository ports
through their constructor.
"""
