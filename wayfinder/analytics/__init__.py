"""
In-process usage analytics.

Responsibilities:
- Record search and show-all events as they happen.
- Summarise them into filter usage, popular months and interests, and
  no-match rates.
"""
