"""
Users bounded context — domain layer.

Holds the User entity, the input rules applied before any persistence,
the UserRepository port and the error taxonomy shared by every layer.
"""
