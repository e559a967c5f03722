"""Message types and keys of the host/guest protocol."""

# Message types
CALL = "call"
CALL_RESULT = "call_result"
RESPOND = "respond"

# Envelope keys
CONTEXT = "context"
INPUTS = "inputs"

# Message keys
TYPE = "type"
ID = "id"
FUNCTION = "function"
RESULT = "result"
ERROR = "error"

# Substituted when the host reports an error that is not a string.
UNKNOWN_ERROR = "Unknown error"
