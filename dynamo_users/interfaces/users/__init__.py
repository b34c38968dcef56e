"""HTTP interface of the users bounded context."""
