"""
Per-user favorite restaurants.

Responsibilities:
- Add and remove restaurant references on a user's favorites list.
- Resolve favorites into full restaurant records.
"""
