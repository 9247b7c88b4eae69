"""LINE Messaging API boundary: webhook models, signature check, reply client, turn handler."""
