"""
Authentication.

Responsibilities:
- Store user accounts with bcrypt password hashes.
- Issue and verify signed bearer tokens.
- Provide FastAPI dependencies that resolve the current user.
"""
