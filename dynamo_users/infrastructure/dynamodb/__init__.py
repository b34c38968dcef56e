"""
DynamoDB adapters for the users bounded context.

The client factory selects DynamoDB Local or the managed service,
the mapper converts users to attribute values, and the repository
implements the UserRepository port on top of both.
"""
