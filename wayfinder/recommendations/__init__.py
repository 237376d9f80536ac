"""
Destination recommendation engine.

Responsibilities:
- Load the static destination catalog.
- Score each destination against the user's budget, month and interests.
- Filter weak matches and rank the rest.
- Track the browsing session's view mode and current result set.
"""
