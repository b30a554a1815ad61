"""
Client-side state layer.

Responsibilities:
- Talk to the HTTP API and unwrap its response envelope.
- Track the authentication session and persist its token.
- Mirror the user's favorites with a per-restaurant in-flight guard.
- Run debounced restaurant searches that ignore stale responses.
"""
