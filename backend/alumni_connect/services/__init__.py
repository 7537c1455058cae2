"""
Client sessions - Stateful views over the messaging use cases.

These are the component boundary: every store error is turned into one error
string held on the session, so nothing raised by a handler escapes to the
presentation code that drives them.
"""

from alumni_connect.services.conversation_inbox import ConversationInbox
from alumni_connect.services.message_thread import MessageThread, ThreadState

__all__ = [
    "ConversationInbox",
    "MessageThread",
    "ThreadState",
]
