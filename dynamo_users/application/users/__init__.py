"""
Application layer for the users bounded context.

Use cases validate input and coordinate the UserRepository port to
fulfill the CRUD operations. No framework or infrastructure imports allowed.
"""
