"""
Canonical message and instruction names for mention hosts.
Stable surface between host adapters and the mention session.
"""

# Host -> session messages
TEXT_CHANGED = "text:changed"
MENTION_CHANGED = "mention:changed"
POSITION_CHANGED = "position:changed"
KEY_EVENT = "key:event"
ROW_CLICKED = "row:clicked"
CLICK_OUTSIDE = "click:outside"

# Session -> host instructions
MENTION_COMMIT = "mention:commit"
MENTION_CLOSE = "mention:close"

HOST_MESSAGES = [
    TEXT_CHANGED,
    MENTION_CHANGED,
    POSITION_CHANGED,
    KEY_EVENT,
    ROW_CLICKED,
    CLICK_OUTSIDE,
]

INSTRUCTIONS = [
    MENTION_COMMIT,
    MENTION_CLOSE,
]
